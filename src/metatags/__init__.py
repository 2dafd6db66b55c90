"""
metatags: metadata tags on entity members, and the queries and checks over them.

This library provides:
- Immutable tag definitions (CustomTag, DeprecatedTag) with usage rules
- Entity descriptors built once, when the entity type is created
- describe / members_of / tags_of queries over a registry of descriptors
- A build time check that fails on references to hard deprecated members
"""

__version__ = "0.1.0"
__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from .errors import (
    ConfigError,
    HardDeprecationError,
    LintError,
    MetatagsError,
    NotFoundError,
    TagCompositionError,
    TagModificationError,
    TracedException,
    format_exception,
)
from .meta import (
    CustomTag,
    DeprecatedTag,
    Entity,
    EntityDescriptor,
    Member,
    MemberKind,
    MetadataTag,
    TagRegistry,
    deprecated,
    describe,
    descriptor_of,
    members_of,
    tag_registry,
    tagged,
    tags_of,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",
    # Tags and descriptors
    "MetadataTag",
    "CustomTag",
    "DeprecatedTag",
    "Member",
    "MemberKind",
    "EntityDescriptor",
    # Declaration
    "Entity",
    "tagged",
    "deprecated",
    "descriptor_of",
    # Queries
    "TagRegistry",
    "tag_registry",
    "describe",
    "members_of",
    "tags_of",
    # Errors
    "TracedException",
    "format_exception",
    "MetatagsError",
    "NotFoundError",
    "TagCompositionError",
    "TagModificationError",
    "HardDeprecationError",
    "LintError",
    "ConfigError",
]
