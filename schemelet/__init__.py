# Core type aliases for schemelet's data model.
# One closed family of value classes (schemelet.types) represents both code (forms)
# and runtime values; the language is homoiconic.
#
# Naming guidance:
# - SExpression: Use in reader code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to the same union and are interchangeable.

from typing import Callable, Sequence, Union

from schemelet.types import Atom, Boolean, DottedPair, Integer, LispList, String

LispValue = Union[Atom, LispList, DottedPair, Integer, String, Boolean]
SExpression = LispValue

# Primitive procedures take the already-evaluated argument values
PrimitiveFn = Callable[[Sequence[LispValue]], LispValue]

# Evaluator function type, passed into special forms
EvaluatorFn = Callable[[SExpression], LispValue]


from schemelet.reader.parser import read_expr  # noqa: E402
from schemelet.evaluation.evaluator import evaluate  # noqa: E402
from schemelet.interpreter import eval_string, read_eval  # noqa: E402

__all__ = [
    "EvaluatorFn",
    "LispValue",
    "PrimitiveFn",
    "SExpression",
    "eval_string",
    "evaluate",
    "read_eval",
    "read_expr",
]
