"""
MIT License

Copyright (c) 2025 Sébastien Gachoud

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.

-------------------------------------------------------------------------------

Author: Sébastien Gachoud
Created: 2026-10-19
Description: The registry of entity descriptors and the metadata queries: describe, members_of and
            tags_of. Queries are linear scans over the statically built descriptors.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import logging
from collections.abc import Iterator
from functools import lru_cache
from typing import TypeVar

from ..errors import NotFoundError
from .members import EntityDescriptor, Member, MemberKind
from .tags import DeprecatedTag, MetadataTag

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=MetadataTag)

class TagRegistry:
    """Maps entity type names to their descriptors.

    Descriptors are registered once, when their entity type is created, and are read-only
    afterwards.
    """

    def __init__(self) -> None:
        self._descriptors: dict[str, EntityDescriptor] = {}

    def register(self, descriptor: EntityDescriptor) -> EntityDescriptor:
        """Register a descriptor under its type name. An existing entry is replaced."""
        if descriptor.type_name in self._descriptors:
            logger.warning(
                "Entity type '%s' is registered again, the previous descriptor is replaced.",
                descriptor.type_name,
            )
        self._descriptors[descriptor.type_name] = descriptor
        logger.debug(
            "Registered entity type '%s' with %d member(s).",
            descriptor.type_name,
            len(descriptor.members),
        )
        return descriptor

    def describe(self, type_name: str) -> EntityDescriptor:
        """Resolve the descriptor of a named entity type.

        Raises:
            NotFoundError: Raised when the type name is unknown.
        """
        try:
            return self._descriptors[type_name]
        except KeyError:
            raise NotFoundError(f"Unknown entity type '{type_name}'.") from None

    def deprecations(self) -> Iterator[tuple[EntityDescriptor, Member, DeprecatedTag]]:
        """Yield every deprecated member of every registered type."""
        for descriptor in self._descriptors.values():
            for member in descriptor.members:
                for tag in tags_of(member, DeprecatedTag):
                    yield descriptor, member, tag

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._descriptors

    def __iter__(self) -> Iterator[EntityDescriptor]:
        return iter(tuple(self._descriptors.values()))

    def __len__(self) -> int:
        return len(self._descriptors)

    def __repr__(self) -> str:
        return f"<TagRegistry ({', '.join(self._descriptors)})>"


@lru_cache(1)
def tag_registry() -> TagRegistry:
    """Default tag registry. Every entity type registers here unless told otherwise.

    Returns:
        TagRegistry: the registry instance.
    """
    return TagRegistry()


def describe(type_name: str, registry: TagRegistry | None = None) -> EntityDescriptor:
    """This function is a shortcut to `tag_registry().describe(type_name)`."""
    return (registry if registry is not None else tag_registry()).describe(type_name)


def members_of(descriptor: EntityDescriptor, member_kind: MemberKind) -> tuple[Member, ...]:
    """Members of the requested kind, in declaration order."""
    return tuple(m for m in descriptor.members if m.kind == member_kind)


def tags_of(member: Member, kind: str | type[T]) -> tuple[T, ...]:
    """Tags of `member` matching `kind`, in attachment order.

    Args:
        member (Member): the member to read.
        kind (str | type[MetadataTag]): a kind name such as 'custom', or a tag definition.

    Returns:
        tuple[MetadataTag, ...]: the matching tags, possibly empty.
    """
    kind_name = kind if isinstance(kind, str) else kind.kind
    return tuple(t for t in member.tags if t.kind == kind_name)  # type: ignore[misc]
