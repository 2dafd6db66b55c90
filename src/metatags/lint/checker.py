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
Description: Build time check of deprecated members. Source files are parsed with ast and every
            reference to a member tagged deprecated in a registry is reported. References to hard
            deprecated members fail the check, the others are advisories.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import ast
import fnmatch
import logging
import tokenize
from collections import defaultdict
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, TypeAlias

from ..errors import HardDeprecationError, LintError
from ..meta.members import EntityDescriptor, Member
from ..meta.registry import TagRegistry
from ..meta.tags import DeprecatedTag

logger = logging.getLogger(__name__)

IGNORE_COMMENT = "# metatags: ignore"

# builtins taking an object then a literal attribute name.
_ATTRIBUTE_FUNCTIONS = frozenset({"getattr", "setattr", "hasattr", "delattr"})

Deprecations: TypeAlias = dict[str, list[tuple[EntityDescriptor, Member, DeprecatedTag]]]


@dataclass(frozen=True)
class Finding:
    """A reference to a deprecated member."""

    path: str
    line: int
    column: int
    type_name: str
    member_name: str
    tag: DeprecatedTag

    @property
    def severity(self) -> Literal["error", "warning"]:
        return self.tag.severity

    @property
    def is_error(self) -> bool:
        return self.tag.is_hard_error

    def format(self) -> str:
        message = f": {self.tag.message}" if self.tag.message else ""
        return (
            f"{self.path}:{self.line}:{self.column}: {self.severity}: "
            f"{self.type_name}.{self.member_name} is deprecated{message}"
        )


def _deprecations(registry: TagRegistry) -> Deprecations:
    """Index the deprecated members of the registry by member name.

    A member inherited without override appears in every derived descriptor; it is indexed
    once, under the first registered type that holds it.
    """
    index: Deprecations = defaultdict(list)
    seen: set[tuple[str, str, DeprecatedTag]] = set()
    for descriptor, member, tag in registry.deprecations():
        key = (member.owner, member.name, tag)
        if key in seen:
            continue
        seen.add(key)
        index[member.name].append((descriptor, member, tag))
    return index


class _ReferenceVisitor(ast.NodeVisitor):
    def __init__(self, deprecations: Deprecations) -> None:
        self.deprecations = deprecations
        self.references: list[tuple[ast.AST, str]] = []

    def visit_Attribute(self, node: ast.Attribute) -> None:
        if node.attr in self.deprecations:
            self.references.append((node, node.attr))
        self.generic_visit(node)

    def visit_Call(self, node: ast.Call) -> None:
        if (
            isinstance(node.func, ast.Name)
            and node.func.id in _ATTRIBUTE_FUNCTIONS
            and len(node.args) >= 2
            and isinstance(node.args[1], ast.Constant)
            and node.args[1].value in self.deprecations
        ):
            self.references.append((node, node.args[1].value))
        self.generic_visit(node)


def check_source(source: str, registry: TagRegistry, filename: str = "<string>") -> list[Finding]:
    """Report the references to deprecated members found in a python source.

    Matching is done on member names only: `x.eat_old` is reported whatever the type of `x`.

    Args:
        source (str): the python source.
        registry (TagRegistry): the registry holding the deprecated members.
        filename (str): the name used in the findings.

    Raises:
        LintError: Raised when the source cannot be parsed.

    Returns:
        list[Finding]: the findings, in source order.
    """
    deprecations = _deprecations(registry)
    if not deprecations:
        return []

    try:
        tree = ast.parse(source, filename=filename)
    except SyntaxError as e:
        raise LintError(f"Cannot parse '{filename}': {e}") from e

    visitor = _ReferenceVisitor(deprecations)
    visitor.visit(tree)

    lines = source.splitlines()
    findings: list[Finding] = []
    for node, member_name in visitor.references:
        lineno = getattr(node, "lineno", 0)
        if 0 < lineno <= len(lines) and lines[lineno - 1].rstrip().endswith(IGNORE_COMMENT):
            logger.debug("Ignored reference to '%s' at %s:%d.", member_name, filename, lineno)
            continue
        for descriptor, _, tag in deprecations[member_name]:
            findings.append(
                Finding(
                    filename,
                    lineno,
                    getattr(node, "col_offset", 0) + 1,
                    descriptor.type_name,
                    member_name,
                    tag,
                )
            )
    findings.sort(key=lambda f: (f.line, f.column))
    return findings


def _is_excluded(path: Path, exclude: Iterable[str]) -> bool:
    posix = path.as_posix()
    return any(fnmatch.fnmatch(posix, pattern) for pattern in exclude)


def iter_python_files(paths: Iterable[str | Path], exclude: Iterable[str] = ()) -> Iterator[Path]:
    """Yield the python files under `paths` in sorted order, skipping excluded ones.

    Raises:
        LintError: Raised when a path does not exist.
    """
    exclude = tuple(exclude)
    for path in map(Path, paths):
        if not path.exists():
            raise LintError(f"Path not found: {path}")
        candidates = sorted(path.rglob("*.py")) if path.is_dir() else [path]
        for candidate in candidates:
            if _is_excluded(candidate, exclude):
                logger.debug("Excluded '%s'.", candidate)
                continue
            yield candidate


def check_paths(
    paths: Iterable[str | Path], registry: TagRegistry, exclude: Iterable[str] = ()
) -> list[Finding]:
    """Run `check_source` on every python file under `paths`."""
    findings: list[Finding] = []
    for path in iter_python_files(paths, exclude):
        try:
            # honours PEP 263 coding cookies.
            with tokenize.open(path) as f:
                source = f.read()
        except (OSError, SyntaxError, UnicodeDecodeError) as e:
            raise LintError(f"Cannot read '{path}': {e}") from e
        findings.extend(check_source(source, registry, str(path)))
    logger.info("Checked deprecated references, %d finding(s).", len(findings))
    return findings


def enforce(findings: Iterable[Finding], advisories_as_errors: bool = False) -> None:
    """Fail on references to hard deprecated members.

    Advisories are logged as warnings, or fail the check too when `advisories_as_errors`.

    Raises:
        HardDeprecationError: Raised with every failing finding.
    """
    failing: list[Finding] = []
    for finding in findings:
        if finding.is_error or advisories_as_errors:
            failing.append(finding)
        else:
            logger.warning(finding.format())
    if failing:
        raise HardDeprecationError(failing)
