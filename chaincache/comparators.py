"""Ordering predicates for integers and people."""

from __future__ import annotations

from chaincache.person import Person


def cmp_int(first: int, second: int) -> bool:
    """Whether ``first`` is less than ``second``."""
    return first < second


def cmp_int_check(first: int, second: int) -> bool:
    """Whether ``first`` is less than or equal to ``second``."""
    return not cmp_int(second, first)


def cmp_person(first: Person, second: Person) -> bool:
    """Order people by the first character of their first names.

    A person with an empty first name comes before everyone.
    """
    if len(first.first_name) == 0:
        return True
    if len(second.first_name) == 0:
        return False
    return ord(first.first_name[0]) < ord(second.first_name[0])


def cmp_person_check(first: Person, second: Person) -> bool:
    """Whether ``first`` does not come after ``second``."""
    return not cmp_person(second, first)