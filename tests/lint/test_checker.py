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
Description: Tests for the build time check of deprecated member references.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import logging
import textwrap
from pathlib import Path

import pytest

from metatags.errors import HardDeprecationError, LintError
from metatags.examples.animals import Animal
from metatags.lint import check_paths, check_source, enforce, iter_python_files
from metatags.meta.entity import Entity, deprecated, descriptor_of
from metatags.meta.registry import TagRegistry

SRC = Path(__file__).resolve().parents[2] / "src"


@pytest.fixture
def registry() -> TagRegistry:
    registry = TagRegistry()
    registry.register(descriptor_of(Animal))

    class Bird(Entity, type_name="test.Bird", registry=registry):
        """Test"""

        @deprecated("Use fly", error=False)
        def flap(self) -> None: ...

    return registry


# =============================================================================
# Call Site Tests
# =============================================================================


class TestCheckSource:
    """Test the references found in a single source."""

    def test_hard_deprecated_call_fails(self, registry):
        """Test that a call to eat_old fails the check."""
        source = "pet = Animal('Ella', 3)\npet.eat_old()\n"
        findings = check_source(source, registry, "app.py")

        assert len(findings) == 1
        finding = findings[0]
        assert (finding.path, finding.line, finding.column) == ("app.py", 2, 1)
        assert finding.type_name == "AttributesExample.Animal"
        assert finding.member_name == "eat_old"
        assert finding.severity == "error"
        with pytest.raises(HardDeprecationError) as exc_info:
            enforce(findings)

        assert exc_info.value.findings == tuple(findings)
        assert "Do not use, use the new implementation instead" in str(exc_info.value)

    def test_current_call_passes(self, registry):
        """Test that a call to eat passes the check."""
        source = "pet = Animal('Ella', 3)\npet.eat()\n"
        assert check_source(source, registry) == []
        enforce([])

    def test_reference_without_call(self, registry):
        """Test that taking a reference is enough to fail."""
        findings = check_source("callback = pet.eat_old\n", registry)
        assert [f.member_name for f in findings] == ["eat_old"]

    def test_getattr_with_literal(self, registry):
        """Test that getattr and friends with a literal name are references."""
        source = textwrap.dedent(
            """
            getattr(pet, "eat_old")()
            hasattr(pet, "eat_old")
            getattr(pet, "eat")()
            getattr(pet, name)
            """
        )
        findings = check_source(source, registry)
        assert [f.line for f in findings] == [2, 3]

    def test_definition_is_not_a_reference(self, registry):
        """Test that defining a method with the same name is not reported."""
        source = "class Other:\n    def eat_old(self):\n        pass\n"
        assert check_source(source, registry) == []

    def test_comments_and_strings_ignored(self, registry):
        """Test that comments and plain strings are not references."""
        source = "# pet.eat_old()\ndoc = 'pet.eat_old()'\n"
        assert check_source(source, registry) == []

    def test_ignore_comment(self, registry):
        """Test that a line ending with the ignore comment is skipped."""
        source = "pet.eat_old()  # metatags: ignore\npet.eat_old()\n"
        findings = check_source(source, registry)
        assert [f.line for f in findings] == [2]

    def test_soft_deprecation_is_advisory(self, registry, caplog):
        """Test that a soft deprecation only warns."""
        findings = check_source("bird.flap()\n", registry, "birds.py")
        assert [f.severity for f in findings] == ["warning"]

        with caplog.at_level(logging.WARNING, logger="metatags.lint.checker"):
            enforce(findings)

        assert "birds.py:1:1: warning: test.Bird.flap is deprecated: Use fly" in caplog.text

    def test_advisories_as_errors(self, registry):
        """Test that advisories fail the check when asked to."""
        findings = check_source("bird.flap()\n", registry)
        with pytest.raises(HardDeprecationError):
            enforce(findings, advisories_as_errors=True)

    def test_findings_in_source_order(self, registry):
        """Test that findings are sorted by position."""
        source = "a.flap(); b.eat_old()\nc.eat_old()\n"
        findings = check_source(source, registry)
        assert [(f.line, f.member_name) for f in findings] == [
            (1, "flap"),
            (1, "eat_old"),
            (2, "eat_old"),
        ]

    def test_inherited_deprecation_reported_once(self):
        """Test that a deprecated member inherited by a derived entity is reported once."""
        registry = TagRegistry()

        class Base(Entity, type_name="test.Base", registry=registry):
            """Test"""

            @deprecated("gone", error=True)
            def old(self) -> None: ...

        class Child(Base, type_name="test.Child", registry=registry):
            """Test"""

        findings = check_source("x.old()\n", registry)
        assert [(f.type_name, f.member_name) for f in findings] == [("test.Base", "old")]
        with pytest.raises(HardDeprecationError) as exc_info:
            enforce(findings)

        assert str(exc_info.value).startswith("1 reference(s)")

    def test_empty_registry(self):
        """Test that nothing is reported, nor parsed, without deprecations."""
        assert check_source("this is not python", TagRegistry()) == []

    def test_syntax_error(self, registry):
        """Test that an unparseable source raises LintError."""
        with pytest.raises(LintError) as exc_info:
            check_source("def broken(:\n", registry, "broken.py")

        assert "Cannot parse 'broken.py'" in str(exc_info.value)

    def test_format(self, registry):
        """Test the rendering of a finding."""
        finding = check_source("pet.eat_old()\n", registry, "app.py")[0]
        assert finding.format() == (
            "app.py:1:1: error: AttributesExample.Animal.eat_old is deprecated: "
            "Do not use, use the new implementation instead"
        )


# =============================================================================
# Path Walking Tests
# =============================================================================


class TestCheckPaths:
    """Test checking files and directories."""

    def test_directory(self, registry, tmp_path):
        """Test that every python file of a directory is checked."""
        (tmp_path / "pkg").mkdir()
        (tmp_path / "pkg" / "a.py").write_text("pet.eat()\n")
        (tmp_path / "pkg" / "b.py").write_text("pet.eat_old()\n")
        (tmp_path / "pkg" / "notes.txt").write_text("pet.eat_old()\n")

        findings = check_paths([tmp_path], registry)
        assert [Path(f.path).name for f in findings] == ["b.py"]

    def test_exclude(self, registry, tmp_path):
        """Test that excluded files are skipped."""
        (tmp_path / "legacy").mkdir()
        (tmp_path / "legacy" / "old.py").write_text("pet.eat_old()\n")
        (tmp_path / "new.py").write_text("pet.eat()\n")

        assert check_paths([tmp_path], registry, exclude=["*/legacy/*"]) == []
        assert [p.name for p in iter_python_files([tmp_path])] == ["old.py", "new.py"]

    def test_missing_path(self, registry, tmp_path):
        """Test that a missing path raises LintError."""
        with pytest.raises(LintError):
            check_paths([tmp_path / "missing"], registry)

    def test_undecodable_file(self, registry, tmp_path):
        """Test that a file that is not valid UTF-8 raises LintError."""
        bad = tmp_path / "bad.py"
        bad.write_bytes(b"x = '\xff'\n")

        with pytest.raises(LintError) as exc_info:
            check_paths([bad], registry)

        assert "Cannot read" in str(exc_info.value)

    def test_coding_cookie(self, registry, tmp_path):
        """Test that a declared source encoding is honoured."""
        legacy = tmp_path / "legacy.py"
        legacy.write_bytes(
            "# -*- coding: latin-1 -*-\nname = 'caf\u00e9'\npet.eat_old()\n".encode("latin-1")
        )

        findings = check_paths([legacy], registry)
        assert [(f.line, f.member_name) for f in findings] == [(3, "eat_old")]

    def test_project_sources_pass(self, registry):
        """Test that the project itself holds no reference to a hard deprecated member."""
        findings = check_paths([SRC], registry)
        enforce(findings)
        assert not [f for f in findings if f.is_error]
