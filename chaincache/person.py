"""A person record with fixed-width name fields."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from chaincache.text import blank, read_padded_line

MAX_LENGTH = 40


def _blank_field() -> str:
    return blank(MAX_LENGTH)


def _read_int(stream: TextIO) -> int:
    char = stream.read(1)
    while char and char.isspace():
        char = stream.read(1)
    sign = ""
    if char in ("+", "-"):
        sign = char
        char = stream.read(1)
    digits = []
    while char and char.isdigit():
        digits.append(char)
        char = stream.read(1)
    if not digits:
        return 0
    return int(sign + "".join(digits))


@dataclass(eq=False)
class Person:
    """A person: identifier, three name parts and a year of birth."""

    id: str = field(default_factory=_blank_field)
    first_name: str = field(default_factory=_blank_field)
    middle_name: str = field(default_factory=_blank_field)
    last_name: str = field(default_factory=_blank_field)
    born_year: int = 2005

    def __post_init__(self) -> None:
        if (
            len(self.id) > MAX_LENGTH
            or len(self.first_name) > MAX_LENGTH
            or len(self.middle_name) > MAX_LENGTH
        ):
            raise ValueError(f"length string more than {MAX_LENGTH}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return (
            self.id == other.id
            and self.middle_name == other.middle_name
            and self.first_name == other.first_name
            and self.last_name == other.last_name
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return (
            f"\n{self.id}\n{self.first_name}\n{self.middle_name}"
            f"\n{self.last_name}\n{self.born_year}\n"
        )

    @classmethod
    def read(cls, stream: TextIO | None = None, out: TextIO | None = None) -> Person:
        """Prompt on ``out`` and read a person's fields from ``stream``.

        Each text field takes at most ``MAX_LENGTH`` characters of a line,
        padded with spaces; the rest of a longer line is discarded.
        """
        stream = sys.stdin if stream is None else stream
        out = sys.stdout if out is None else out

        def read_field(label: str) -> str:
            out.write(f"Enter {label}( max {MAX_LENGTH} symbols) :\n")
            text, complete = read_padded_line(stream, MAX_LENGTH)
            if not complete:
                stream.readline()
            return text

        first_name = read_field("first name")
        middle_name = read_field("middle name")
        last_name = read_field("last name")
        person_id = read_field("id")
        out.write("Enter born year\n")
        born_year = _read_int(stream)
        return cls(person_id, first_name, middle_name, last_name, born_year)