"""Build time check of deprecated member references."""

from .checker import (
    IGNORE_COMMENT,
    Finding,
    check_paths,
    check_source,
    enforce,
    iter_python_files,
)

__all__ = [
    "IGNORE_COMMENT",
    "Finding",
    "check_paths",
    "check_source",
    "enforce",
    "iter_python_files",
]
