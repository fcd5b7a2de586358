"""Cons cell used to build lists and trees."""

from __future__ import annotations

from typing import Iterable, Iterator

from tinyscheme import LispValue
from tinyscheme.types.nil import Nil


class Pair:
    """A two-slot node. The core never mutates a Pair once built."""

    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue = Nil):
        self.car = car
        self.cdr = cdr

    def __iter__(self) -> Iterator[LispValue]:
        """Iterate over the cars of a proper (or improper) list, ignoring any non-Nil tail."""
        cur = self
        while isinstance(cur, Pair):
            yield cur.car
            cur = cur.cdr

    def __eq__(self, other) -> bool:
        # Structural equality, walked iteratively along the cdr spine
        a, b = self, other
        while isinstance(a, Pair):
            if not isinstance(b, Pair) or a.car != b.car:
                return False
            a, b = a.cdr, b.cdr
        return a == b

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Pair({self.car!r}, {self.cdr!r})"

    def __str__(self) -> str:
        from tinyscheme.printer import to_string
        return to_string(self)


def from_list(items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a right-nested list from a Python iterable."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def to_list(value: LispValue) -> list[LispValue]:
    """Collect the cars of a list into a Python list (Nil gives [])."""
    return list(value) if isinstance(value, Pair) else []


def list_length(value: LispValue) -> int:
    n = 0
    while isinstance(value, Pair):
        n += 1
        value = value.cdr
    return n
