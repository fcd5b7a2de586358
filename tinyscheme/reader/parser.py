"""
  Lisp Reader: Lexer and Parser

- Streaming, lazy parsing over a token generator
- Emits runtime values directly (code is data):

    - numbers  -> float
    - #t       -> Symbol("#t")
    - #f       -> Nil
    - lists    -> right-nested Pair chain ending in Nil
    - anything else -> Symbol

There is no dotted-pair, string, character or comment syntax. Malformed input
is not diagnosed: a stray ')' reads as Nil and a list left open at end of
input is closed there.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from tinyscheme import SExpression
from tinyscheme.types.nil import Nil
from tinyscheme.types.pair import from_list
from tinyscheme.types.symbol import TRUE, Symbol


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<boolean>#[tf])"  # #t / #f, always two characters
    r"|(?P<atom>[^\s()]+)"  # numbers and symbols
    r")"
)

NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # only whitespace left
            break
        pos = m.end()
        kind = m.lastgroup
        yield kind, m.group(kind)


def is_number_token(tok: str) -> bool:
    return NUMBER_RE.fullmatch(tok) is not None


def parse_atom(tok: str) -> SExpression:
    if is_number_token(tok):
        return float(tok)
    return Symbol(tok)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
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

    def at_end(self) -> bool:
        return self.peek()[0] is None

    def parse_expr(self) -> Optional[SExpression]:
        """Read one form; None signals clean end of input."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return None

        if tok_type == "lparen":
            items = []
            while True:
                nxt = self.peek()[0]
                if nxt == "rparen":
                    self.advance()
                    break
                if nxt is None:
                    break
                items.append(self.parse_expr())
            return from_list(items)

        # Unmatched close paren reads as the empty list
        if tok_type == "rparen":
            return Nil

        if tok_type == "boolean":
            return TRUE if tok_val == "#t" else Nil

        return parse_atom(tok_val)

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            expr = self.parse_expr()
            if expr is None:
                break
            yield expr


def parse(source: str) -> Optional[SExpression]:
    """Read exactly one form from `source`, discarding whatever follows."""
    return TokenStream(lex(source)).parse_expr()


def parse_all(source: str) -> Iterator[SExpression]:
    """Read every top-level form in `source`."""
    return TokenStream(lex(source)).parse_all()
