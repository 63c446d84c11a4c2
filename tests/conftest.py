import pytest

from schemelet.evaluation.evaluator import evaluate
from schemelet.reader.parser import read_expr


# Most suites exercise the whole pipeline: read one expression, evaluate it.
# `run` returns the resulting value and lets errors propagate, so tests can
# use pytest.raises on the error taxonomy directly.


@pytest.fixture
def run():
    def _run(source):
        return evaluate(read_expr(source))
    return _run
