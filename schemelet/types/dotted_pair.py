"""Improper lists: one or more leading items terminated by an arbitrary tail."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from schemelet import LispValue


class DottedPair:
    __slots__ = ("_items", "_tail")
    __match_args__ = ("items", "tail")

    def __init__(self, items: Iterable[LispValue], tail: LispValue):
        self._items: tuple[LispValue, ...] = tuple(items)
        if not self._items:
            raise ValueError("DottedPair requires at least one item before the tail")
        self._tail: LispValue = tail

    @property
    def items(self) -> tuple[LispValue, ...]:
        return self._items

    @property
    def tail(self) -> LispValue:
        return self._tail

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, DottedPair)
            and self._items == other._items
            and self._tail == other._tail
        )

    def __hash__(self) -> int:
        return hash(("dotted", self._items, self._tail))

    def __repr__(self) -> str:
        return f"DottedPair({list(self._items)!r}, {self._tail!r})"

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(")
            buffer.write(" ".join(str(item) for item in self._items))
            buffer.write(" . ")
            buffer.write(str(self._tail))
            buffer.write(")")
            return buffer.getvalue()
