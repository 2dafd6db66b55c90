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
Description: Helpers to read tags out of class annotations and to render member names.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import inspect
import logging
import sys
from typing import Annotated, Any, TypeAlias, get_args, get_origin

logger = logging.getLogger(__name__)

Annotation: TypeAlias = Any


def resolve_own_annotations(cls: type) -> dict[str, Annotation]:
    """
    Get the annotations declared by `cls` itself, in declaration order. See
    inspect.get_annotations.

    String annotations (e.g. under `from __future__ import annotations`) are evaluated in the
    module of the class, with the class itself in scope so that self references resolve even
    before its name is bound. An annotation that still cannot be evaluated (e.g. a name only
    imported under TYPE_CHECKING) is kept as its string, so it carries no Annotated metadata.

    Args:
        cls (type): the class to read.

    Returns:
        dict[str, Any]: A dictionary of annotations, base classes excluded.
    """
    module = sys.modules.get(cls.__module__)
    module_globals = dict(vars(module)) if module is not None else {}
    class_locals = {cls.__name__: cls, **vars(cls)}

    resolved: dict[str, Annotation] = {}
    for name, annotation in inspect.get_annotations(cls).items():
        if isinstance(annotation, str):
            try:
                annotation = eval(annotation, module_globals, class_locals)  # noqa: S307
            except NameError as e:
                logger.debug(
                    "Annotation of '%s.%s' left unresolved: %s", cls.__qualname__, name, e
                )
        resolved[name] = annotation
    return resolved


def annotated_metadata(annotation: Annotation) -> tuple[Any, ...]:
    """Return the metadata of an Annotated annotation, () for any other annotation."""
    if get_origin(annotation) is Annotated:
        return get_args(annotation)[1:]
    return ()


def to_pascal_case(name: str) -> str:
    """Convert a snake_case identifier to PascalCase.

    Examples:
        >>> to_pascal_case("eat_old")
        'EatOld'
        >>> to_pascal_case("name")
        'Name'
    """
    return "".join(part[:1].upper() + part[1:] for part in name.split("_") if part)
