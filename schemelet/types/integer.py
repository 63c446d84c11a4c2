from __future__ import annotations

# int <-> str conversions longer than this are split in halves, since CPython
# refuses to convert very long decimals directly (sys.get_int_max_str_digits)
_DIRECT_DIGITS = 4000
_DIRECT_LIMIT = 10 ** _DIRECT_DIGITS
_LOG10_2 = 0.30102999566398120


def parse_decimal(text: str) -> int:
    """int(text) for an optionally signed run of ASCII digits, of any length."""
    if text.startswith("-"):
        return -parse_decimal(text[1:])
    if len(text) <= _DIRECT_DIGITS:
        return int(text)
    split = len(text) // 2
    return parse_decimal(text[:split]) * 10 ** (len(text) - split) + parse_decimal(text[split:])


def format_decimal(n: int) -> str:
    """str(n) for an int of any size."""
    if n < 0:
        return "-" + format_decimal(-n)
    if n < _DIRECT_LIMIT:
        return str(n)
    low_digits = int(n.bit_length() * _LOG10_2) // 2
    high, low = divmod(n, 10 ** low_digits)
    return format_decimal(high) + format_decimal(low).zfill(low_digits)


class Integer:
    """An unbounded integer."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: int):
        self._value = int(value)

    @property
    def value(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Integer) and self._value == other._value

    def __hash__(self) -> int:
        return hash(("integer", self._value))

    def __repr__(self) -> str:
        return f"Integer({format_decimal(self._value)})"

    def __str__(self) -> str:
        return format_decimal(self._value)
