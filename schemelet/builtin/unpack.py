"""Coercions from Lisp values to the Python values primitives operate on."""

from __future__ import annotations

import re

from schemelet import LispValue
from schemelet.errors import TypeMismatchError
from schemelet.types import Boolean, Integer, LispList, String
from schemelet.types.integer import parse_decimal

# Leading integer prefix of a string, e.g. " 12abc" -> 12
_NUMERIC_PREFIX = re.compile(r"\s*(-?[0-9]+)")


def unpack_num(value: LispValue) -> int:
    match value:
        case Integer(n):
            return n
        case String(s):
            m = _NUMERIC_PREFIX.match(s)
            if m is None:
                raise TypeMismatchError("number", value)
            return parse_decimal(m.group(1))
        case LispList((inner,)):
            return unpack_num(inner)
    raise TypeMismatchError("number", value)


def unpack_str(value: LispValue) -> str:
    """Strings pass through; integers and booleans are rendered as text."""
    match value:
        case String(s):
            return s
        case Integer() | Boolean():
            return str(value)
    raise TypeMismatchError("string", value)


def unpack_bool(value: LispValue) -> bool:
    if isinstance(value, Boolean):
        return value.value
    raise TypeMismatchError("boolean", value)
