"""Conversion from syntax tree nodes to runtime values.

One node kind maps to exactly one value variant; children are converted
recursively and nothing is evaluated.
"""

from __future__ import annotations

from mlisp.reader.ast import ExprNode, NumberNode, QExprNode, SExprNode, StringNode, SymbolNode
from mlisp.types.symbol import Symbol
from mlisp.types.values import Number, QExpr, SExpr, String, Value


def from_ast(node: ExprNode) -> Value:
    match node:
        case NumberNode(value=value):
            return Number(value)
        case SymbolNode(name=name):
            return Symbol(name)
        case StringNode(text=text):
            return String(text)
        case SExprNode(children=children):
            return SExpr(from_ast(child) for child in children)
        case QExprNode(children=children):
            return QExpr(from_ast(child) for child in children)
    raise TypeError(f"Not a syntax tree node: {node!r}")
