"""Syntax tree produced by the reader.

Nodes carry the location they were read from; the conversion to runtime values
(mlisp.reader.convert.from_ast) drops it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class SourceLocation:
    filename: str
    lineno: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.lineno}"


DUMMY_LOCATION = SourceLocation("<input>", 0)


@dataclass
class NumberNode:
    value: float
    location: SourceLocation = DUMMY_LOCATION


@dataclass
class SymbolNode:
    name: str
    location: SourceLocation = DUMMY_LOCATION


@dataclass
class StringNode:
    text: str
    location: SourceLocation = DUMMY_LOCATION


@dataclass
class SExprNode:
    children: list[ExprNode] = field(default_factory=list)
    location: SourceLocation = DUMMY_LOCATION


@dataclass
class QExprNode:
    children: list[ExprNode] = field(default_factory=list)
    location: SourceLocation = DUMMY_LOCATION


ExprNode = Union[NumberNode, SymbolNode, StringNode, SExprNode, QExprNode]
