"""Metadata tags, entity descriptors and the queries over them."""

from .members import EntityDescriptor, Member, MemberKind
from .tags import CustomTag, DeprecatedTag, MetadataTag, tag_kind, tag_kinds
from .registry import TagRegistry, describe, members_of, tag_registry, tags_of
from .entity import Entity, EntityMeta, deprecated, descriptor_of, tagged

__all__ = [
    # Descriptors
    "EntityDescriptor",
    "Member",
    "MemberKind",
    # Tags
    "MetadataTag",
    "CustomTag",
    "DeprecatedTag",
    "tag_kind",
    "tag_kinds",
    # Queries
    "TagRegistry",
    "tag_registry",
    "describe",
    "members_of",
    "tags_of",
    # Declaration
    "Entity",
    "EntityMeta",
    "tagged",
    "deprecated",
    "descriptor_of",
]
