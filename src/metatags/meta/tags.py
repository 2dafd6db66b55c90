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
Description: Tag definitions. A tag is an immutable piece of metadata attached to an entity member.
            The usage rules of a tag (kind, repeatability, inheritance, targets) are declared
            with class keywords on its definition.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from dataclasses import dataclass
from typing import Any, ClassVar, Literal

from ..errors import NotFoundError, TagCompositionError
from .members import MemberKind

_TAG_KINDS: dict[str, type[MetadataTag]] = {}


@dataclass(frozen=True)
class MetadataTag:
    """Base class of tag definitions.

    Examples:
        >>> @dataclass(frozen=True)
        ... class Unit(MetadataTag, kind="unit", targets=frozenset({MemberKind.FIELD})):
        ...     symbol: str

        >>> Unit("kg").kind
        'unit'
    """

    kind: ClassVar[str]
    allow_multiple: ClassVar[bool] = False
    inherited: ClassVar[bool] = True
    targets: ClassVar[frozenset[MemberKind]] = frozenset(MemberKind)

    def __init_subclass__(
        cls,
        /,
        kind: str | None = None,
        allow_multiple: bool | None = None,
        inherited: bool | None = None,
        targets: frozenset[MemberKind] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        if targets is not None and not targets:
            raise TagCompositionError(
                f"Tag definition '{cls.__name__}' must target at least one member kind."
            )
        if kind is None:
            # a subclass of a concrete definition shares its kind.
            if not hasattr(cls, "kind"):
                raise TagCompositionError(
                    f"Tag definition '{cls.__name__}' needs a kind: "
                    f"class {cls.__name__}(MetadataTag, kind='...')."
                )
        elif kind in _TAG_KINDS:
            raise TagCompositionError(
                f"Tag kind '{kind}' of '{cls.__name__}' is already defined by "
                f"'{_TAG_KINDS[kind].__qualname__}'."
            )

        if allow_multiple is not None:
            cls.allow_multiple = allow_multiple
        if inherited is not None:
            cls.inherited = inherited
        if targets is not None:
            cls.targets = frozenset(targets)
        if kind is not None:
            cls.kind = kind
            _TAG_KINDS[kind] = cls


@dataclass(frozen=True)
class CustomTag(MetadataTag, kind="custom", allow_multiple=True, inherited=True):
    """Free form descriptive tag.

    Attributes:
        label (str): short category of the member, e.g. 'Accessor'.
        description (str): what the member is for.
    """

    label: str
    description: str


@dataclass(frozen=True)
class DeprecatedTag(MetadataTag, kind="deprecated", allow_multiple=False, inherited=False):
    """Marks a superseded member.

    When `is_hard_error` is True, no reference to the member may exist: the build time check
    (see metatags.lint) fails. Otherwise references are reported as advisories.
    """

    message: str = ""
    is_hard_error: bool = False

    @property
    def severity(self) -> Literal["error", "warning"]:
        return "error" if self.is_hard_error else "warning"


def tag_kind(kind: str) -> type[MetadataTag]:
    """Resolve a kind name to its tag definition.

    Raises:
        NotFoundError: Raised when no definition has this kind.
    """
    try:
        return _TAG_KINDS[kind]
    except KeyError:
        raise NotFoundError(
            f"Unknown tag kind '{kind}'. Known kinds: {', '.join(sorted(_TAG_KINDS))}."
        ) from None


def tag_kinds() -> tuple[str, ...]:
    """Names of every known tag kind, in definition order."""
    return tuple(_TAG_KINDS)
