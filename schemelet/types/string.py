from __future__ import annotations


class String:
    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: str):
        self._value = value

    @property
    def value(self) -> str:
        return self._value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, String) and self._value == other._value

    def __hash__(self) -> int:
        return hash(("string", self._value))

    def __repr__(self) -> str:
        return f"String({self._value!r})"

    def __str__(self) -> str:
        return f'"{self._value}"'
