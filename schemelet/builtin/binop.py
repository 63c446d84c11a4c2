"""Builders for the binary primitive families.

numeric_binop left-folds two or more numbers into an Integer; bool_binop
compares exactly two unpacked arguments and yields a Boolean.
"""

from __future__ import annotations

from functools import reduce
from typing import Callable, Sequence, TypeVar

from schemelet import LispValue, PrimitiveFn
from schemelet.errors import ArityMismatchError, DivisionByZeroError
from schemelet.builtin.unpack import unpack_num
from schemelet.types import Boolean, Integer

T = TypeVar("T")


def quotient(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def remainder(a: int, b: int) -> int:
    """Remainder taking the sign of the dividend; pairs with quotient."""
    return a - b * quotient(a, b)


def numeric_binop(name: str, op: Callable[[int, int], int]) -> PrimitiveFn:
    def primitive(args: Sequence[LispValue]) -> LispValue:
        if len(args) < 2:
            raise ArityMismatchError(2, args)
        values = [unpack_num(arg) for arg in args]
        try:
            return Integer(reduce(op, values))
        except ZeroDivisionError as exc:
            raise DivisionByZeroError(name, args) from exc

    return primitive


def bool_binop(
    unpacker: Callable[[LispValue], T], op: Callable[[T, T], bool]
) -> PrimitiveFn:
    def primitive(args: Sequence[LispValue]) -> LispValue:
        if len(args) != 2:
            raise ArityMismatchError(2, args)
        left = unpacker(args[0])
        right = unpacker(args[1])
        return Boolean(op(left, right))

    return primitive
