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
Description: End to end tests of the Animal tutorial.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import io

from metatags.examples.animals import ANIMAL_TYPE_NAME, Animal, run_demo
from metatags.meta import CustomTag, DeprecatedTag, MemberKind, describe, members_of, tags_of

EXPECTED_TRACE = """\
Ella
3
Buddy
Buddy eats
AttributesExample.Animal
Name
Accessor
Sets / Gets the name of the animal
Age
Accessor
Sets / Gets the age of the animal
EatOld
Do not use, use the new implementation instead
True
"""


class TestAnimal:
    """Test the Animal entity."""

    def test_construction(self):
        """Test that both fields are set by the constructor."""
        pet = Animal("Ella", 3)
        assert pet.name == "Ella"
        assert pet.age == 3

    def test_mutation_keeps_tags(self):
        """Test that renaming a pet does not change the tags of its name."""
        descriptor = describe(ANIMAL_TYPE_NAME)
        before = tags_of(descriptor.member("name"), CustomTag)

        pet = Animal("Ella", 3)
        pet.name = "Buddy"

        assert pet.name == "Buddy"
        assert tags_of(describe(ANIMAL_TYPE_NAME).member("name"), CustomTag) == before
        assert before == (CustomTag("Accessor", "Sets / Gets the name of the animal"),)

    def test_eat(self):
        """Test that eat uses the current name."""
        out = io.StringIO()
        pet = Animal("Rex", 2)
        pet.eat(out)
        assert out.getvalue() == "Rex eats\n"

    def test_descriptor(self):
        """Test the members and tags of Animal."""
        descriptor = describe(ANIMAL_TYPE_NAME)
        assert [m.name for m in members_of(descriptor, MemberKind.FIELD)] == ["name", "age"]
        assert [m.name for m in members_of(descriptor, MemberKind.METHOD)] == ["eat_old", "eat"]
        assert tags_of(descriptor.member("eat"), DeprecatedTag) == ()
        assert tags_of(descriptor.member("eat_old"), DeprecatedTag) == (
            DeprecatedTag("Do not use, use the new implementation instead", is_hard_error=True),
        )


class TestRunDemo:
    """Test the printed trace of the tutorial."""

    def test_trace(self):
        """Test the exact output of the tutorial."""
        out = io.StringIO()
        run_demo(out)
        assert out.getvalue() == EXPECTED_TRACE

    def test_trace_on_stdout(self, capsys):
        """Test that the tutorial prints to stdout by default."""
        run_demo()
        assert capsys.readouterr().out == EXPECTED_TRACE
