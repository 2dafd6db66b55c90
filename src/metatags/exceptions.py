"""
Re-export exceptions module for cleaner imports.

This allows: from metatags.exceptions import NotFoundError
Instead of: from metatags.errors import NotFoundError
"""

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

__all__ = [
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
