"""
  Lisp Reader

- Character-driven recursive descent over a single forward cursor
- Reads exactly one leading expression; trailing text is ignored

    - nil -> Nil
    - t -> Bool(True)
    - lists -> LispList
    - symbols -> Symbol
    - strings -> String (only \\" and \\n are decoded)
    - numbers -> Number (optionally negative, optionally decimal)
    - 'x -> (quote x)
"""

from __future__ import annotations

import re

from emlisp import SExpression
from emlisp.errors import ParseError
from emlisp.types.value import (
    Symbol, Number, String, LispList, Nil, T,
)

NUMBER_RE = re.compile(r"-?[0-9]+(\.[0-9]+)?")

ATOM_TERMINATORS = frozenset("()")
QUOTE = Symbol("quote")


class Reader:
    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def peek(self) -> str:
        return self.source[self.pos]

    def skip_whitespace(self) -> None:
        n = len(self.source)
        while self.pos < n and self.source[self.pos].isspace():
            self.pos += 1

    def read_expr(self) -> SExpression:
        self.skip_whitespace()
        if self.at_end():
            return Nil
        c = self.peek()
        if c == '"':
            return self.read_string()
        if c == "(":
            return self.read_list()
        if c == "'":
            self.pos += 1
            return LispList.of(QUOTE, self.read_expr())
        return self.read_atom()

    def read_string(self) -> String:
        self.pos += 1  # opening "
        start = self.pos
        n = len(self.source)
        while self.pos < n and self.source[self.pos] != '"':
            if self.source[self.pos] == "\\":
                # Skip whatever follows the backslash, unvalidated
                self.pos += 1
            self.pos += 1
        raw = self.source[start:self.pos]
        self.pos += 1  # closing "
        return String(raw.replace('\\"', '"').replace("\\n", "\n"))

    def read_list(self) -> LispList:
        self.pos += 1  # (
        items = []
        while True:
            self.skip_whitespace()
            if self.at_end():
                raise ParseError("Unclosed list")
            if self.peek() == ")":
                self.pos += 1
                return LispList(items)
            items.append(self.read_expr())

    def read_atom(self) -> SExpression:
        start = self.pos
        n = len(self.source)
        while self.pos < n:
            c = self.source[self.pos]
            if c.isspace() or c in ATOM_TERMINATORS:
                break
            self.pos += 1
        token = self.source[start:self.pos]
        if token == "t":
            return T
        if token == "nil":
            return Nil
        if NUMBER_RE.fullmatch(token):
            return Number(float(token))
        return Symbol(token)


def parse(source: str) -> SExpression:
    """Read the first expression in `source`.

    Only one top-level expression is read; anything after it is ignored.
    Blank input reads as Nil.
    """
    return Reader(source).read_expr()
