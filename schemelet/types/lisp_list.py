"""Proper lists. The empty list is simply ``LispList()``; there is no Nil type."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Iterable, Iterator

if TYPE_CHECKING:
    from schemelet import LispValue


class LispList:
    __slots__ = ("_items",)
    __match_args__ = ("items",)

    def __init__(self, items: Iterable[LispValue] = ()):
        self._items: tuple[LispValue, ...] = tuple(items)

    @property
    def items(self) -> tuple[LispValue, ...]:
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[LispValue]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, LispList) and self._items == other._items

    def __hash__(self) -> int:
        return hash(("list", self._items))

    def __repr__(self) -> str:
        return f"LispList({list(self._items)!r})"

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(")
            buffer.write(" ".join(str(item) for item in self._items))
            buffer.write(")")
            return buffer.getvalue()


EMPTY_LIST = LispList()
