from __future__ import annotations

from typing import Sequence

from schemelet import LispValue
from schemelet.errors import ArityMismatchError, SchemeletError
from schemelet.types import Atom, Boolean, DottedPair, FALSE, Integer, LispList, String


def eqv(args: Sequence[LispValue]) -> LispValue:
    """(eqv? a b): #t when a and b are the same variant holding equal contents.

    Lists compare element-wise; dotted lists compare as the list of their items
    followed by their tail. Values of different variants are never eqv.
    """
    match args:
        case [Boolean(a), Boolean(b)] | [Integer(a), Integer(b)] | [String(a), String(b)] | [Atom(a), Atom(b)]:
            return Boolean(a == b)
        case [DottedPair(xs, x), DottedPair(ys, y)]:
            return eqv([LispList((*xs, x)), LispList((*ys, y))])
        case [LispList(xs), LispList(ys)]:
            return Boolean(len(xs) == len(ys) and all(_eqv_pair(x, y) for x, y in zip(xs, ys)))
        case [_, _]:
            return FALSE
    raise ArityMismatchError(2, args)


def _eqv_pair(left: LispValue, right: LispValue) -> bool:
    # A failed element comparison counts as "not equal"
    try:
        result = eqv([left, right])
    except SchemeletError:
        return False
    return isinstance(result, Boolean) and result.value
