"""Error taxonomy for schemelet.

Every failure while reading or evaluating is one of these exceptions. Each carries
the structured context needed to render a diagnostic, exposed as read-only
attributes. Errors are raised where the failure happens and reach the caller
unchanged; only the driver (schemelet.interpreter.read_eval) turns them into text.
"""

from __future__ import annotations

from typing import Sequence


def _unwords(values: Sequence[object]) -> str:
    return " ".join(str(v) for v in values)


class SchemeletError(Exception):
    """ Base class for all schemelet errors"""

    def render(self) -> str:
        return str(self)


class ArityMismatchError(SchemeletError):
    """ Raised when a primitive receives the wrong number of arguments"""

    def __init__(self, expected: int, found: Sequence[object]):
        self._expected = expected
        self._found = tuple(found)
        super().__init__(f"Expected {expected} args; found values {_unwords(self._found)}".rstrip())

    @property
    def expected(self) -> int:
        return self._expected

    @property
    def found(self) -> tuple:
        return self._found


class TypeMismatchError(SchemeletError):
    """ Raised when an argument cannot be unpacked as the kind a primitive needs"""

    def __init__(self, expected_kind: str, found: object):
        self._expected_kind = expected_kind
        self._found = found
        super().__init__(f"Invalid type: expected {expected_kind}, found {found}")

    @property
    def expected_kind(self) -> str:
        return self._expected_kind

    @property
    def found(self) -> object:
        return self._found


class SchemeletSyntaxError(SchemeletError):
    """ Raised when the reader cannot parse its input"""

    def __init__(self, detail: str, line: int = 1, column: int = 1):
        self._detail = detail
        self._line = line
        self._column = column
        super().__init__(f'Parse error at "lisp" (line {line}, column {column}): {detail}')

    @property
    def detail(self) -> str:
        return self._detail

    @property
    def line(self) -> int:
        return self._line

    @property
    def column(self) -> int:
        return self._column


class BadFormError(SchemeletError):
    """ Raised when a form has no evaluation rule"""

    def __init__(self, message: str, form: object):
        self._message = message
        self._form = form
        super().__init__(f"{message}: {form}")

    @property
    def message(self) -> str:
        return self._message

    @property
    def form(self) -> object:
        return self._form


class UnknownProcedureError(SchemeletError):
    """ Raised when a list head names no primitive"""

    def __init__(self, message: str, name: str):
        self._message = message
        self._name = name
        super().__init__(f'{message}: "{name}"')

    @property
    def message(self) -> str:
        return self._message

    @property
    def name(self) -> str:
        return self._name


class UnboundVariableError(SchemeletError):
    """ Raised when a variable is used before it is bound"""

    def __init__(self, message: str, name: str):
        self._message = message
        self._name = name
        super().__init__(f"{message}: {name}")

    @property
    def message(self) -> str:
        return self._message

    @property
    def name(self) -> str:
        return self._name


class GenericError(SchemeletError):
    """ Raised for failures with no more specific kind"""

    def __init__(self, message: str = "An error has occurred"):
        self._message = message
        super().__init__(message)

    @property
    def message(self) -> str:
        return self._message


class DivisionByZeroError(GenericError):
    """ Raised when /, mod, quotient or remainder meets a zero divisor"""

    def __init__(self, operator: str, args: Sequence[object]):
        self._operator = operator
        self._args = tuple(args)
        super().__init__(f"Division by zero in ({operator} {_unwords(self._args)})")

    @property
    def operator(self) -> str:
        return self._operator

    @property
    def arguments(self) -> tuple:
        return self._args
