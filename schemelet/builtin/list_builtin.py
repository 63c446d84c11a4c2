"""Pair primitives: car, cdr and cons over proper and dotted lists."""

from __future__ import annotations

from typing import Sequence

from schemelet import LispValue
from schemelet.errors import ArityMismatchError, TypeMismatchError
from schemelet.types import DottedPair, LispList


def car(args: Sequence[LispValue]) -> LispValue:
    """Return the first element of a non-empty list or dotted list."""
    match args:
        case [LispList((first, *_))]:
            return first
        case [DottedPair((first, *_), _)]:
            return first
        case [bad_arg]:
            raise TypeMismatchError("pair", bad_arg)
    raise ArityMismatchError(1, args)


def cdr(args: Sequence[LispValue]) -> LispValue:
    """Return everything after the first element.

    (cdr '(1 . 2)) is the bare tail 2; longer dotted lists keep their tail.
    """
    match args:
        case [LispList((_, *rest))]:
            return LispList(rest)
        case [DottedPair((_,), tail)]:
            return tail
        case [DottedPair((_, *rest), tail)]:
            return DottedPair(rest, tail)
        case [bad_arg]:
            raise TypeMismatchError("pair", bad_arg)
    raise ArityMismatchError(1, args)


def cons(args: Sequence[LispValue]) -> LispValue:
    """Prepend x to y; a non-list y makes a dotted pair."""
    match args:
        case [x, LispList(items)]:
            return LispList((x, *items))
        case [x, DottedPair(items, tail)]:
            return DottedPair((x, *items), tail)
        case [x, y]:
            return DottedPair((x,), y)
    raise ArityMismatchError(2, args)
