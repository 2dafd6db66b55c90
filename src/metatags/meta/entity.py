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
Description: This module provides the declaration side of metatags: the tagged and deprecated
            decorators for methods, Annotated tags for fields, and the Entity base class whose
            metaclass builds and registers the descriptor of each entity type.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import inspect
from collections import Counter
from typing import Any, Callable, ClassVar, NoReturn, TypeVar, get_origin

from ..errors import TagCompositionError, TagModificationError
from .members import EntityDescriptor, Member, MemberKind
from .registry import TagRegistry, tag_registry
from .tags import DeprecatedTag, MetadataTag
from .utilities import annotated_metadata, resolve_own_annotations

F = TypeVar("F")

TAGS_ATTRIBUTE = "__metatags__"


def _unwrap(obj: Any) -> Any:
    """Return the function carrying the tags of a class attribute."""
    if isinstance(obj, property):
        return obj.fget
    if isinstance(obj, (staticmethod, classmethod)):
        return obj.__func__
    return obj


def tagged(*tags: MetadataTag) -> Callable[[F], F]:
    """Attach tags to a method (or to the getter of a property).

    Stacked decorators keep the top to bottom order of declaration.

    Examples:
        >>> class Pet(Entity):
        ...     @tagged(CustomTag("Action", "Feeds the pet"))
        ...     def eat(self): ...

    Raises:
        TagCompositionError: Raised when an argument is not a MetadataTag.
    """
    for tag in tags:
        if not isinstance(tag, MetadataTag):
            raise TagCompositionError(f"{tag!r} is not a MetadataTag and cannot be attached.")

    def decorator(obj: F) -> F:
        target = _unwrap(obj)
        # decorators are applied bottom up.
        existing = getattr(target, TAGS_ATTRIBUTE, ())
        setattr(target, TAGS_ATTRIBUTE, (*tags, *existing))
        return obj

    return decorator


def deprecated(message: str = "", error: bool = False) -> Callable[[F], F]:
    """Shortcut to `tagged(DeprecatedTag(message, is_hard_error=error))`."""
    return tagged(DeprecatedTag(message, is_hard_error=error))


def _is_member_name(name: str) -> bool:
    return not name.startswith("_")


def _own_members(cls: type, type_name: str) -> dict[str, Member]:
    """Collect the members declared by `cls` itself. Fields first, then methods."""
    members: dict[str, Member] = {}

    for name, annotation in resolve_own_annotations(cls).items():
        if not _is_member_name(name) or get_origin(annotation) is ClassVar:
            continue
        tags = tuple(m for m in annotated_metadata(annotation) if isinstance(m, MetadataTag))
        members[name] = Member(name, MemberKind.FIELD, tags, type_name)

    for name, value in cls.__dict__.items():
        if not _is_member_name(name) or name in members:
            continue
        if isinstance(value, property):
            kind = MemberKind.FIELD
        elif inspect.isfunction(_unwrap(value)):
            kind = MemberKind.METHOD
        else:
            continue
        tags = tuple(getattr(_unwrap(value), TAGS_ATTRIBUTE, ()))
        members[name] = Member(name, kind, tags, type_name)

    return members


def _verify_usage(type_name: str, member: Member) -> None:
    """Verify that the tags of a member follow the usage rules of their definitions.

    Raises:
        TagCompositionError: Raised when a tag targets another member kind or when a non
            repeatable tag is attached more than once.
    """
    for tag in member.tags:
        if member.kind not in tag.targets:
            raise TagCompositionError(
                f"Tag '{tag.kind}' cannot be attached to {member.kind} '{member.name}' of "
                f"'{type_name}'. Allowed targets: {', '.join(sorted(tag.targets))}."
            )
    counts = Counter(type(tag) for tag in member.tags)
    for definition, count in counts.items():
        if count > 1 and not definition.allow_multiple:
            raise TagCompositionError(
                f"Tag '{definition.kind}' is attached {count} times to '{member.name}' of "
                f"'{type_name}' but is not repeatable."
            )


def _override(own: Member, base: Member) -> Member:
    """Merge the inheritable tags of `base` into the overriding member `own`."""
    own_kinds = {tag.kind for tag in own.tags}
    inherited = tuple(
        tag
        for tag in base.tags
        if tag.inherited and (tag.allow_multiple or tag.kind not in own_kinds)
    )
    return Member(own.name, own.kind, own.tags + inherited, own.owner)


def _build_descriptor(cls: type, type_name: str, bases: tuple[type, ...]) -> EntityDescriptor:
    members: dict[str, Member] = {}
    base_names: list[str] = []

    for base in bases:
        base_descriptor = base.__dict__.get("__descriptor__")
        if base_descriptor is None:
            continue
        base_names.append(base_descriptor.type_name)
        for member in base_descriptor.members:
            members.setdefault(member.name, member)

    for name, member in _own_members(cls, type_name).items():
        if name in members:
            member = _override(member, members[name])
        _verify_usage(type_name, member)
        members[name] = member

    return EntityDescriptor(type_name, tuple(members.values()), tuple(base_names))


class EntityMeta(type):
    """Metaclass of entities. Builds the descriptor of the class once, at creation."""

    __descriptor__: EntityDescriptor

    def __new__(
        mcs,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        /,
        type_name: str | None = None,
        registry: TagRegistry | None = None,
        register: bool = True,
        **kwargs: Any,
    ) -> Any:
        if "__descriptor__" in namespace:
            raise TagCompositionError(
                f"Entity class '{name}' cannot declare '__descriptor__', it is built from its"
                " members."
            )

        cls = super().__new__(mcs, name, bases, namespace, **kwargs)

        if type_name is None:
            type_name = f"{cls.__module__}.{cls.__qualname__}"
        descriptor = _build_descriptor(cls, type_name, bases)
        type.__setattr__(cls, "__descriptor__", descriptor)

        if register:
            (registry if registry is not None else tag_registry()).register(descriptor)
        return cls

    def __setattr__(cls, name: str, value: Any) -> None:
        if name == "__descriptor__":
            _modification_error(cls)
        super().__setattr__(name, value)

    def __delattr__(cls, name: str) -> None:
        if name == "__descriptor__":
            _modification_error(cls)
        super().__delattr__(name)


def _modification_error(cls: type) -> NoReturn:
    raise TagModificationError(
        f"The descriptor of '{cls.__name__}' cannot be modified. Reason: metadata is fixed when"
        " the type is created."
    )


class Entity(metaclass=EntityMeta, register=False):
    """Base class of entities whose members carry tags.

    Examples:
        >>> class Pet(Entity, type_name="zoo.Pet"):
        ...     name: Annotated[str, CustomTag("Accessor", "The name of the pet")]
        ...
        ...     @deprecated("Use eat", error=True)
        ...     def eat_old(self): ...

        >>> [m.name for m in descriptor_of(Pet).members]
        ['name', 'eat_old']
    """

    __descriptor__: ClassVar[EntityDescriptor]


def descriptor_of(obj: Any) -> EntityDescriptor:
    """Return the descriptor of an entity class or of an entity instance.

    Raises:
        TypeError: Raised when `obj` is not an entity.
    """
    cls = obj if isinstance(obj, type) else type(obj)
    if not isinstance(cls, EntityMeta):
        raise TypeError(f"'{cls.__name__}' is not an entity type.")
    return cls.__descriptor__
