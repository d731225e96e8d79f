"""
  Lisp Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits Python primitives instead of Cons cells:

    - lists -> tuple (immutable; the empty tuple is nil)
    - symbols -> Symbol
    - strings -> str
    - numbers -> int/float
    - #t / #f -> True / False
    - 'x -> (quote x)
"""

from __future__ import annotations

import re
from typing import Iterator, Optional, Iterable

from risp import SExpression
from risp.errors import RispSyntaxError
from risp.types.symbol import Symbol

QUOTE = Symbol("quote")

TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<open_string>")'  # a quote that never closes
    r"|(?P<symbol>[^\s()'\";]+)"  # fallback: symbols, numbers, booleans
    r")",
    re.DOTALL,
)

INT_RE = re.compile(r"-?\d+")
FLOAT_RE = re.compile(r"-?\d*\.\d+")
ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

NAMED_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples; comments are dropped."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # only trailing whitespace can fail to match
            break
        pos = m.end()
        for nm in TOKEN_RE.groupindex:
            val = m.group(nm)
            if val is None:
                continue
            if nm == "open_string":
                raise RispSyntaxError("Unexpected end of input while parsing string")
            if nm != "comment":
                yield nm, val
            break


def _unescape(text: str) -> str:
    return ESCAPE_RE.sub(lambda m: NAMED_ESCAPES.get(m.group(1), m.group(1)), text)


def parse_atom(text: str) -> SExpression:
    """Turn a bare token into a number, boolean or symbol."""
    if INT_RE.fullmatch(text):
        return int(text)
    if FLOAT_RE.fullmatch(text):
        return float(text)
    if text == "#t":
        return True
    if text == "#f":
        return False
    return Symbol(text)


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression:
        """Parse the next expression, or return None when the input is exhausted."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            return parse_atom(tok_val)

        if tok_type == "string":
            return _unescape(tok_val[1:-1])

        if tok_type == "quote":
            expr = self.parse_expr()
            if expr is None:
                raise RispSyntaxError("Expected an expression after quote")
            return (QUOTE, expr)

        if tok_type == "lparen":
            items = []
            while True:
                next_type, _ = self.peek()
                if next_type is None:
                    raise RispSyntaxError("Unmatched '('")
                if next_type == "rparen":
                    self.advance()
                    return tuple(items)
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise RispSyntaxError("Right paren without matching left paren")

        raise RispSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while (expr := self.parse_expr()) is not None:
            yield expr


def read(source: str) -> list[SExpression]:
    """Read every top-level expression in `source`."""
    return list(TokenStream(lex(source)).parse_all())
