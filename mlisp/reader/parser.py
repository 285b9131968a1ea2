"""
  MLisp Reader: Lexer and Parser

- Streaming, lazy tokenizing
- Emits syntax tree nodes (mlisp.reader.ast), each tagged with file and line:

    - numbers          -> NumberNode (always a float)
    - "strings"        -> StringNode (escapes \\" \\\\ \\n \\t decoded)
    - ( ... )          -> SExprNode
    - { ... }          -> QExprNode
    - everything else  -> SymbolNode
    - ; comments run to the end of the line
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, NamedTuple, Optional

from mlisp.errors import MLispSyntaxError
from mlisp.reader.ast import (
    ExprNode,
    NumberNode,
    QExprNode,
    SExprNode,
    SourceLocation,
    StringNode,
    SymbolNode,
)


TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<unterminated>")'  # a quote that never closes
    r'|(?P<atom>[^\s(){}";]+)',  # numbers and symbols
    re.DOTALL,
)

NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    '"': '"',
    "\\": "\\",
}

CLOSERS = {"lparen": "rparen", "lbrace": "rbrace"}
BRACKETS = {"rparen": ")", "rbrace": "}"}


class Token(NamedTuple):
    kind: str
    value: str
    lineno: int


def unescape(body: str) -> str:
    """Decode backslash escapes; unknown escapes stand for the escaped character."""
    return re.sub(r"\\(.)", lambda m: ESCAPES.get(m.group(1), m.group(1)), body, flags=re.DOTALL)


def lex(source: str, filename: str = "<input>") -> Iterator[Token]:
    """Token generator: yields Token(kind, value, lineno) tuples, comments dropped."""
    pos = 0
    n = len(source)
    lineno = 1

    while pos < n:
        ch = source[pos]
        if ch.isspace():
            if ch == "\n":
                lineno += 1
            pos += 1
            continue

        m = TOKEN_RE.match(source, pos)
        if not m:
            raise MLispSyntaxError(f"unexpected character {ch!r}", filename, lineno)
        kind = m.lastgroup
        if kind == "unterminated":
            raise MLispSyntaxError("unterminated string", filename, lineno)
        text = m.group(kind)
        if kind != "comment":
            yield Token(kind, text, lineno)
        lineno += text.count("\n")
        pos = m.end()


class TokenStream:
    def __init__(self, token_iter: Iterable[Token], filename: str = "<input>"):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []
        self.filename = filename
        self.lineno = 1

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        tok = self.buffer.pop(0) if self.buffer else next(self.tokens, None)
        if tok is not None:
            self.lineno = tok.lineno
        return tok

    def location(self, tok: Token) -> SourceLocation:
        return SourceLocation(self.filename, tok.lineno)

    def parse_expr(self) -> Optional[ExprNode]:
        """Parse one expression, or return None at end of input."""
        tok = self.peek()
        if tok is None:
            return None

        if tok.kind == "atom":
            self.advance()
            if NUMBER_RE.fullmatch(tok.value):
                return NumberNode(float(tok.value), self.location(tok))
            return SymbolNode(tok.value, self.location(tok))

        if tok.kind == "string":
            self.advance()
            return StringNode(unescape(tok.value[1:-1]), self.location(tok))

        if tok.kind in CLOSERS:
            self.advance()
            node = SExprNode if tok.kind == "lparen" else QExprNode
            return node(self._parse_children(CLOSERS[tok.kind]), self.location(tok))

        raise MLispSyntaxError(f"unexpected token: `{tok.value}`", self.filename, tok.lineno)

    def _parse_children(self, closer: str) -> list[ExprNode]:
        children: list[ExprNode] = []
        while True:
            tok = self.peek()
            if tok is None:
                raise MLispSyntaxError(
                    f"unexpected end of input: expected `{BRACKETS[closer]}`",
                    self.filename,
                    self.lineno,
                )
            if tok.kind == closer:
                self.advance()
                return children
            children.append(self.parse_expr())

    def parse_all(self) -> Iterator[ExprNode]:
        while self.peek() is not None:
            yield self.parse_expr()


def parse_program(source: str, filename: str = "<input>") -> list[ExprNode]:
    """Parse every top-level expression of `source`."""
    return list(TokenStream(lex(source, filename), filename).parse_all())


def parse(source: str, filename: str = "<input>") -> ExprNode:
    """Parse `source` as a single expression.

    A single top-level expression is returned as-is; anything else (including
    no expression at all) is wrapped in an s-expression, so that REPL input
    like `+ 1 2` reads as `(+ 1 2)`.
    """
    nodes = parse_program(source, filename)
    if len(nodes) == 1:
        return nodes[0]
    return SExprNode(nodes, SourceLocation(filename, 1))
