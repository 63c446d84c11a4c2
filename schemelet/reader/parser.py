"""
  Lisp Reader, Lexer and Parser

- Reads exactly one expression from a string; trailing input is an error
- Emits schemelet.types values:

    - symbols -> Atom
    - #t / #f -> Boolean
    - strings -> String (no escapes; any character except '"')
    - numbers -> Integer (unsigned decimal literals)
    - lists -> LispList, () -> empty LispList
    - dotted lists -> DottedPair(items, tail)
    - quote forms -> LispList([Atom("quote"), expr])

Whitespace is significant: one or more whitespace characters separate list
elements, and none is allowed at the top level or just inside parentheses.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, NamedTuple, NoReturn

from schemelet import SExpression
from schemelet.errors import SchemeletSyntaxError
from schemelet.types import Atom, DottedPair, EMPTY_LIST, FALSE, Integer, LispList, String, TRUE
from schemelet.types.integer import parse_decimal

logger = logging.getLogger(__name__)

SYMBOL_CHARS = "!#$%&|*+-/:<=>?@^_~"

_LETTER = r"[^\W\d_]"
_SYMBOL = "[" + re.escape(SYMBOL_CHARS) + "]"

TOKEN_RE = re.compile(
    r"(?P<whitespace>\s+)"
    r"|(?P<quote>')"
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<dot>\.)"
    r'|(?P<string>"[^"]*")'
    r"|(?P<number>[0-9]+)"
    rf"|(?P<atom>(?:{_LETTER}|{_SYMBOL})(?:{_LETTER}|[0-9]|{_SYMBOL})*)"
)

BOOLEAN_LITERALS = {
    "#t": TRUE,
    "#f": FALSE,
}


class Token(NamedTuple):
    type: str
    value: str
    line: int
    column: int

    def describe(self) -> str:
        if self.type == "eof":
            return "end of input"
        if self.type == "whitespace":
            return "whitespace"
        return f'"{self.value}"'


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Tokens and finishes with a single 'eof' Token."""
    pos = 0
    line, column = 1, 1
    n = len(source)

    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            if source[pos] == '"':
                raise SchemeletSyntaxError('unexpected end of input; expecting "\\""', line, column)
            raise SchemeletSyntaxError(f'unexpected character "{source[pos]}"', line, column)
        kind = m.lastgroup
        text = m.group()
        yield Token(kind, text, line, column)
        newlines = text.count("\n")
        if newlines:
            line += newlines
            column = len(text) - text.rfind("\n")
        else:
            column += len(text)
        pos = m.end()

    yield Token("eof", "", line, column)


class TokenStream:
    def __init__(self, token_iter: Iterator[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> Token:
        if not self.buffer:
            self.buffer.append(next(self.tokens))
        return self.buffer[0]

    def advance(self) -> Token:
        tok = self.peek()
        # 'eof' is sticky: the lexer yields it once and it is never consumed
        if tok.type != "eof":
            self.buffer.pop(0)
        return tok

    def expect(self, tok_type: str, expecting: str) -> Token:
        tok = self.peek()
        if tok.type != tok_type:
            self.fail(tok, expecting)
        return self.advance()

    @staticmethod
    def fail(tok: Token, expecting: str) -> NoReturn:
        raise SchemeletSyntaxError(f"unexpected {tok.describe()}; expecting {expecting}", tok.line, tok.column)

    def parse_expr(self) -> SExpression:
        tok = self.peek()

        if tok.type == "atom":
            self.advance()
            if tok.value in BOOLEAN_LITERALS:
                return BOOLEAN_LITERALS[tok.value]
            return Atom(tok.value)

        if tok.type == "string":
            self.advance()
            return String(tok.value[1:-1])

        if tok.type == "number":
            self.advance()
            return Integer(parse_decimal(tok.value))

        # 'x => (quote x)
        if tok.type == "quote":
            self.advance()
            return LispList([Atom("quote"), self.parse_expr()])

        if tok.type == "lparen":
            self.advance()
            return self.parse_list()

        self.fail(tok, "expression")

    def parse_list(self) -> SExpression:
        """Parse the rest of a list or dotted list; the '(' is already consumed."""
        if self.peek().type == "rparen":
            self.advance()
            return EMPTY_LIST

        items = [self.parse_expr()]
        while True:
            tok = self.peek()
            if tok.type == "rparen":
                self.advance()
                return LispList(items)
            if tok.type != "whitespace":
                self.fail(tok, 'space or ")"')
            self.advance()

            # A '.' after at least one element switches to a dotted list
            if self.peek().type == "dot":
                self.advance()
                self.expect("whitespace", "space")
                tail = self.parse_expr()
                self.expect("rparen", '")"')
                return DottedPair(items, tail)

            items.append(self.parse_expr())


def read_expr(source: str) -> SExpression:
    """Parse exactly one expression from `source`.

    Raises SchemeletSyntaxError for input that matches no expression or that
    leaves trailing input behind.
    """
    stream = TokenStream(lex(source))
    expr = stream.parse_expr()
    stream.expect("eof", "end of input")
    logger.debug("Read %r as %s", source, expr)
    return expr
