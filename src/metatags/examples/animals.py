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
Description: Tutorial: an Animal entity whose members carry a custom tag and a deprecation tag, and
            the walk over its descriptor that prints them.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import sys
from typing import Annotated, TextIO

from ..meta import (
    CustomTag,
    DeprecatedTag,
    Entity,
    MemberKind,
    deprecated,
    describe,
    members_of,
    tags_of,
)

ANIMAL_TYPE_NAME = "AttributesExample.Animal"


class Animal(Entity, type_name=ANIMAL_TYPE_NAME):
    """A pet. Both fields are freely readable and writable."""

    name: Annotated[str, CustomTag("Accessor", "Sets / Gets the name of the animal")]
    age: Annotated[int, CustomTag("Accessor", "Sets / Gets the age of the animal")]

    def __init__(self, name: str, age: int) -> None:
        self.name = name
        self.age = age

    # Referencing this method fails `metatags lint`. With error=False it would only warn.
    @deprecated("Do not use, use the new implementation instead", error=True)
    def eat_old(self, out: TextIO | None = None) -> None:
        print("The animal eats", file=out)

    def eat(self, out: TextIO | None = None) -> None:
        print(f"{self.name} eats", file=out)


def run_demo(out: TextIO | None = None) -> None:
    """Use an Animal, then print the tags attached to its members."""
    out = out if out is not None else sys.stdout

    pet = Animal("Ella", 3)
    print(pet.name, file=out)
    print(pet.age, file=out)

    pet.name = "Buddy"
    print(pet.name, file=out)

    pet.eat(out)

    descriptor = describe(ANIMAL_TYPE_NAME)
    print(descriptor.type_name, file=out)

    for field in members_of(descriptor, MemberKind.FIELD):
        for custom in tags_of(field, CustomTag):
            print(field.display_name, file=out)
            print(custom.label, file=out)
            print(custom.description, file=out)

    for method in members_of(descriptor, MemberKind.METHOD):
        for obsolete in tags_of(method, DeprecatedTag):
            print(method.display_name, file=out)
            print(obsolete.message, file=out)
            print(obsolete.is_hard_error, file=out)
