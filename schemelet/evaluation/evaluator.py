"""Core evaluator for schemelet.

Reduces one form to one value. Literals evaluate to themselves, special forms
are dispatched by their head Atom, and every other (name arg ...) list has its
arguments evaluated left to right before the named primitive is applied. The
first error raised anywhere aborts the whole evaluation.
"""

from __future__ import annotations

from schemelet import SExpression, LispValue
from schemelet.errors import BadFormError
from schemelet.evaluation.apply import apply
from schemelet.evaluation.special_forms import SPECIAL_FORMS
from schemelet.types import Atom, Boolean, Integer, LispList, String


def evaluate(expr: SExpression) -> LispValue:
    match expr:
        case String() | Integer() | Boolean():
            return expr

        case LispList((Atom(name), *tail_args)):
            # --- Special forms handling ---
            if name in SPECIAL_FORMS:
                return SPECIAL_FORMS[name](expr, tail_args, evaluate)
            args = [evaluate(arg) for arg in tail_args]
            return apply(name, args)

    # Bare atoms, empty lists, non-atom heads and dotted lists
    raise BadFormError("Unrecognized special form", expr)
