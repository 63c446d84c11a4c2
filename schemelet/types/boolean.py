from __future__ import annotations


class Boolean:
    """``#t`` or ``#f``. Never equal to an Integer, even though Python's bool is an int."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: bool):
        self._value = bool(value)

    @property
    def value(self) -> bool:
        return self._value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Boolean) and self._value == other._value

    def __hash__(self) -> int:
        return hash(("boolean", self._value))

    def __repr__(self) -> str:
        return f"Boolean({self._value})"

    def __str__(self) -> str:
        return "#t" if self._value else "#f"


TRUE = Boolean(True)
FALSE = Boolean(False)
