from schemelet import EvaluatorFn, LispValue, SExpression
from schemelet.errors import BadFormError
from schemelet.types import FALSE


def if_form(
    form: SExpression,
    tail: list[SExpression],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise BadFormError("if requires a condition plus then and else expressions", form)

    pred, conseq, alt = tail
    # Only #f is false; every other value, including non-booleans, is true
    if evaluate_fn(pred) == FALSE:
        return evaluate_fn(alt)
    return evaluate_fn(conseq)
