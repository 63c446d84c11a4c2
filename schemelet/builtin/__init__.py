"""The fixed primitive table.

PRIMITIVES maps each procedure name to its implementation. It is assembled once
at import time and exposed read-only; there is no registration API.
"""

from __future__ import annotations

import operator
from types import MappingProxyType
from typing import Mapping

from schemelet import PrimitiveFn
from schemelet.builtin.binop import bool_binop, numeric_binop, quotient, remainder
from schemelet.builtin.equivalence import eqv
from schemelet.builtin.list_builtin import car, cdr, cons
from schemelet.builtin.unpack import unpack_bool, unpack_num, unpack_str


def _logical_and(a: bool, b: bool) -> bool:
    return a and b


def _logical_or(a: bool, b: bool) -> bool:
    return a or b


def _build_primitives() -> Mapping[str, PrimitiveFn]:
    table: dict[str, PrimitiveFn] = {
        # -------------------------------
        # Arithmetic
        # -------------------------------
        "+": numeric_binop("+", operator.add),
        "-": numeric_binop("-", operator.sub),
        "*": numeric_binop("*", operator.mul),
        "/": numeric_binop("/", operator.floordiv),
        "mod": numeric_binop("mod", operator.mod),
        "quotient": numeric_binop("quotient", quotient),
        "remainder": numeric_binop("remainder", remainder),
        # -------------------------------
        # Numeric comparison
        # -------------------------------
        "=": bool_binop(unpack_num, operator.eq),
        "<": bool_binop(unpack_num, operator.lt),
        ">": bool_binop(unpack_num, operator.gt),
        "/=": bool_binop(unpack_num, operator.ne),
        ">=": bool_binop(unpack_num, operator.ge),
        "<=": bool_binop(unpack_num, operator.le),
        # -------------------------------
        # Boolean logic
        # -------------------------------
        "&&": bool_binop(unpack_bool, _logical_and),
        "||": bool_binop(unpack_bool, _logical_or),
        # -------------------------------
        # String comparison
        # -------------------------------
        "string=?": bool_binop(unpack_str, operator.eq),
        "string<?": bool_binop(unpack_str, operator.lt),
        "string>?": bool_binop(unpack_str, operator.gt),
        "string<=?": bool_binop(unpack_str, operator.le),
        "string>=?": bool_binop(unpack_str, operator.ge),
        # -------------------------------
        # Pairs and equivalence
        # -------------------------------
        "car": car,
        "cdr": cdr,
        "cons": cons,
        "eqv?": eqv,
    }
    return MappingProxyType(table)


PRIMITIVES: Mapping[str, PrimitiveFn] = _build_primitives()
