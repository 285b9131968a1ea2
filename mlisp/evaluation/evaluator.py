"""Core evaluator for the MLisp interpreter.

A state-free recursive procedure: symbols are looked up, s-expressions are
applied, and every other value evaluates to itself. Failures travel as Error
values; the first one produced while evaluating an s-expression's items is
returned without evaluating the rest.
"""

from __future__ import annotations

from mlisp import LispValue
from mlisp.errors import MLispUnboundSymbol
from mlisp.evaluation.apply import apply
from mlisp.types.environment import Environment
from mlisp.types.symbol import Symbol
from mlisp.types.values import Error, SExpr


def evaluate(env: Environment, value: LispValue) -> LispValue:
    """Evaluate `value` in `env`."""
    match value:
        case Symbol():
            try:
                return env.get(value.name)
            except MLispUnboundSymbol as e:
                return Error(str(e))
        case SExpr():
            return evaluate_sexpr(env, value)

    # --- Everything else is self-evaluating ---
    return value


def evaluate_sexpr(env: Environment, sexpr: SExpr) -> LispValue:
    values = []
    for item in sexpr.items:
        result = evaluate(env, item)
        if isinstance(result, Error):
            return result
        values.append(result)

    if not values:
        return SExpr()

    # A single element is returned as-is, collapsing redundant grouping.
    if len(values) == 1:
        return values[0]

    head, *args = values
    return apply(head, args, env, evaluate)
