"""Read-eval driver.

Each call is independent: nothing is carried from one expression to the next.
"""

from __future__ import annotations

import logging

from schemelet import LispValue
from schemelet.errors import SchemeletError
from schemelet.evaluation.evaluator import evaluate
from schemelet.reader.parser import read_expr

logger = logging.getLogger(__name__)


def eval_string(code: str) -> LispValue:
    """Read one expression from `code` and evaluate it. Errors propagate."""
    return evaluate(read_expr(code))


def read_eval(code: str) -> str:
    """Evaluate `code` and render the result, or render the error instead."""
    try:
        return str(eval_string(code))
    except SchemeletError as err:
        logger.info("Evaluation of %r failed: %s", code, err)
        return err.render()
