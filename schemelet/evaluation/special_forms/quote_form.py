from schemelet import EvaluatorFn, LispValue, SExpression
from schemelet.errors import BadFormError


def quote_form(
    form: SExpression,
    tail: list[SExpression],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 1:
        raise BadFormError("quote requires exactly one expression", form)
    return tail[0]
