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
Description: Configuration of the deprecation check, read from the [tool.metatags] table of a
            pyproject.toml file.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import importlib
import logging
import tomllib
from collections.abc import Iterable
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from .errors import ConfigError

logger = logging.getLogger(__name__)

TOOL_TABLE = "metatags"


def _string_tuple(key: str, value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return tuple(value)
    raise ConfigError(f"'{key}' must be a string or a list of strings, got {value!r}.")


@dataclass(frozen=True)
class LintConfig:
    """Settings of the deprecation check.

    Example pyproject.toml:

        [tool.metatags]
        modules = ["metatags.examples.animals"]
        paths = ["src"]
        exclude = ["*/migrations/*"]
        advisories_as_errors = false

    Attributes:
        modules (tuple[str, ...]): modules declaring entities, imported so their descriptors are
            registered before the check.
        paths (tuple[str, ...]): files and directories to check.
        exclude (tuple[str, ...]): glob patterns of files to skip.
        advisories_as_errors (bool): fail on soft deprecations too.
    """

    modules: tuple[str, ...] = ()
    paths: tuple[str, ...] = ("src",)
    exclude: tuple[str, ...] = ()
    advisories_as_errors: bool = False

    @classmethod
    def from_dict(cls, table: dict[str, Any]) -> LintConfig:
        """Build a configuration from a [tool.metatags] table.

        Raises:
            ConfigError: Raised on unknown keys or wrong value types.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(table) - known
        if unknown:
            raise ConfigError(f"Unknown metatags setting(s): {', '.join(sorted(unknown))}.")

        values: dict[str, Any] = {}
        for key in ("modules", "paths", "exclude"):
            if key in table:
                values[key] = _string_tuple(key, table[key])
        if "advisories_as_errors" in table:
            if not isinstance(table["advisories_as_errors"], bool):
                raise ConfigError(
                    f"'advisories_as_errors' must be a boolean, got "
                    f"{table['advisories_as_errors']!r}."
                )
            values["advisories_as_errors"] = table["advisories_as_errors"]
        return cls(**values)

    @classmethod
    def load(cls, path: str | Path = "pyproject.toml") -> LintConfig:
        """Load the configuration from a pyproject.toml file.

        A missing file or a missing [tool.metatags] table gives the defaults.

        Raises:
            ConfigError: Raised when the file is not valid TOML or the table is invalid.
        """
        path = Path(path)
        if not path.exists():
            logger.debug("Config file not found: %s, using defaults.", path)
            return cls()
        try:
            document = tomllib.loads(path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in '{path}': {e}") from e

        table = document.get("tool", {}).get(TOOL_TABLE)
        if table is None:
            logger.debug("No [tool.%s] table in %s, using defaults.", TOOL_TABLE, path)
            return cls()
        if not isinstance(table, dict):
            raise ConfigError(f"[tool.{TOOL_TABLE}] in '{path}' must be a table.")
        return cls.from_dict(table)

    def import_modules(self) -> None:
        """Import the configured entity modules. See import_entity_modules."""
        import_entity_modules(self.modules)


def import_entity_modules(names: Iterable[str]) -> None:
    """Import entity modules so that their descriptors are registered.

    Raises:
        ConfigError: Raised when a module cannot be imported.
    """
    for name in names:
        try:
            importlib.import_module(name)
        except ImportError as e:
            raise ConfigError(f"Cannot import entity module '{name}': {e}") from e
        logger.debug("Imported entity module '%s'.", name)
