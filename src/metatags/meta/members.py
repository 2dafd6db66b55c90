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
Description: Descriptors of entity types: the members of a type and the tags attached to them.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from .utilities import to_pascal_case

if TYPE_CHECKING:
    from .tags import MetadataTag


class MemberKind(StrEnum):
    """Kind of an entity member."""

    FIELD = "field"
    METHOD = "method"


@dataclass(frozen=True)
class Member:
    """One field or method of an entity type.

    Attributes:
        name (str): the python identifier of the member.
        kind (MemberKind): field or method.
        tags (tuple[MetadataTag, ...]): the attached tags, in declaration order.
        owner (str): the name of the type that declares the member.
    """

    name: str
    kind: MemberKind
    tags: tuple[MetadataTag, ...] = ()
    owner: str = ""

    @property
    def display_name(self) -> str:
        """The member name in PascalCase, e.g. 'eat_old' gives 'EatOld'."""
        return to_pascal_case(self.name)

    def __str__(self) -> str:
        return f"{self.owner}.{self.name}" if self.owner else self.name


@dataclass(frozen=True)
class EntityDescriptor:
    """Static shape of an entity type. Built once, when the type is created."""

    type_name: str
    members: tuple[Member, ...] = ()
    bases: tuple[str, ...] = ()

    def member(self, name: str) -> Member | None:
        """Return the member named `name` or None."""
        for m in self.members:
            if m.name == name:
                return m
        return None

    def __str__(self) -> str:
        return self.type_name
