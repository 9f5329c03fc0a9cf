"""
  Sprig Reader: Lexer and Parser

- Streaming, lazy parsing of whitespace-delimited tokens
- Emits plain Python values as syntax tree nodes:

    - numbers -> float
    - lists -> Python list
    - everything else -> Symbol
"""

from __future__ import annotations

import re
from typing import Iterator, Iterable, Optional

from sprig import SExpression
from sprig.errors import SprigSyntaxError
from sprig.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<symbol>[^\s();]+)"  # atoms: numbers and symbols
    r")"
)


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None or m.end() == pos:
            # only trailing whitespace remains
            break
        pos = m.end()
        kind = m.lastgroup
        if kind is None or kind == "comment":
            continue
        yield kind, m.group(kind)


def parse_atom(token: str) -> SExpression:
    try:
        return float(token)
    except ValueError:
        return Symbol(token)


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

    def parse_expr(self) -> Optional[SExpression]:
        """Parse the next node, or return None at end of input."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            return parse_atom(tok_val)

        if tok_type == "rparen":
            raise SprigSyntaxError(None, "Unexpected ')'")

        items: list[SExpression] = []
        while True:
            next_type, _ = self.peek()
            if next_type is None:
                raise SprigSyntaxError(None, "Unmatched '('")
            if next_type == "rparen":
                self.advance()
                return items
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            expr = self.parse_expr()
            if expr is None:
                break
            yield expr


def read(source: str) -> list[SExpression]:
    """Parse every top-level node in `source`."""
    return list(TokenStream(lex(source)).parse_all())
