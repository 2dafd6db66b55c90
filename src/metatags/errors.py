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
Description: Exceptions raised by metatags. Every error is a TracedException so that callers
            can render it with its traceback in a single string.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import traceback
from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .lint.checker import Finding


def format_exception(e: BaseException) -> str:
    """Format the provided exception to a string with its traceback.

    Args:
        e (BaseException): The exception to format.

    Returns:
        str: The string representation of the exception with its traceback.
    """
    return "".join(traceback.format_exception(type(e), e, e.__traceback__))


class TracedException(Exception):
    """Base traceable exception class."""

    def traceback_format(self) -> str:
        """Format the exception to a string with its traceback."""
        return format_exception(self)


class MetatagsError(TracedException):
    """Base class of every metatags error."""


class NotFoundError(MetatagsError, LookupError):
    """Signals an unknown entity type name or tag kind."""


class TagCompositionError(MetatagsError):
    """Signals a tag declaration that breaks the usage rules of its definition."""


class TagModificationError(MetatagsError):
    """Signals an attempt to modify type level metadata after the type was built."""


class LintError(MetatagsError):
    """Signals a source file that the deprecation check cannot read or parse."""


class ConfigError(MetatagsError):
    """Signals an invalid metatags configuration."""


class HardDeprecationError(MetatagsError):
    """Signals references to members deprecated with is_hard_error=True.

    Raised by the build time check, never by the members themselves.
    """

    def __init__(self, findings: Iterable[Finding]) -> None:
        self.findings: tuple[Finding, ...] = tuple(findings)
        lines = "\n".join(f.format() for f in self.findings)
        super().__init__(
            f"{len(self.findings)} reference(s) to hard deprecated members:\n{lines}"
        )
