"""Comparison, equality, boolean and conditional builtins.

Truth values are numbers: any non-zero number is true, and every builtin here
that produces a truth value returns 1 or 0.
"""
from __future__ import annotations

import operator
from typing import Callable

from mlisp import LispValue
from mlisp.builtin.checks import check_all_type, check_len_eq, check_len_ge, check_len_le, check_type
from mlisp.evaluation.evaluator import evaluate
from mlisp.types.environment import Environment
from mlisp.types.values import Number, QExpr, SExpr

TRUE = Number(1)
FALSE = Number(0)


def truth(flag: bool) -> Number:
    return TRUE if flag else FALSE


# -------------------------------
# Ordering
# -------------------------------
_ORDERINGS: dict[str, Callable[[float, float], bool]] = {
    "<": operator.lt,
    "<=": operator.le,
    ">=": operator.ge,
    ">": operator.gt,
}


def ordering(op: str, args: list[LispValue]) -> LispValue:
    """Chainable comparison: 1 if `op` holds for every adjacent pair, else 0."""
    err = check_len_ge(op, args, 2) or check_all_type(op, args, Number)
    if err:
        return err
    nums = [a.as_num() for a in args]
    cmp = _ORDERINGS[op]
    return truth(all(cmp(a, b) for a, b in zip(nums, nums[1:])))


def lt(env: Environment, args: list[LispValue]) -> LispValue:
    return ordering("<", args)


def le(env: Environment, args: list[LispValue]) -> LispValue:
    return ordering("<=", args)


def ge(env: Environment, args: list[LispValue]) -> LispValue:
    return ordering(">=", args)


def gt(env: Environment, args: list[LispValue]) -> LispValue:
    return ordering(">", args)


# -------------------------------
# Equality
# -------------------------------
def equals(env: Environment, args: list[LispValue]) -> LispValue:
    """Structural equality of exactly two values of any type."""
    err = check_len_eq("==", args, 2)
    if err:
        return err
    return truth(args[0] == args[1])


def not_equals(env: Environment, args: list[LispValue]) -> LispValue:
    err = check_len_eq("!=", args, 2)
    if err:
        return err
    return truth(args[0] != args[1])


# -------------------------------
# Boolean logic
# -------------------------------
def logical_and(env: Environment, args: list[LispValue]) -> LispValue:
    err = check_len_eq("and", args, 2) or check_all_type("and", args, Number)
    if err:
        return err
    return truth(args[0].as_num() != 0 and args[1].as_num() != 0)


def logical_or(env: Environment, args: list[LispValue]) -> LispValue:
    err = check_len_eq("or", args, 2) or check_all_type("or", args, Number)
    if err:
        return err
    return truth(args[0].as_num() != 0 or args[1].as_num() != 0)


def logical_not(env: Environment, args: list[LispValue]) -> LispValue:
    err = check_len_eq("not", args, 1) or check_type("not", args, 0, Number)
    if err:
        return err
    return truth(args[0].as_num() == 0)


# -------------------------------
# Conditional
# -------------------------------
def if_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(if cond {then} {else}): evaluate the chosen branch in the caller's environment.

    Without an else branch a false condition evaluates the empty expression `()`.
    """
    err = (
        check_len_ge("if", args, 2)
        or check_len_le("if", args, 3)
        or check_type("if", args, 0, Number)
        or check_type("if", args, 1, QExpr)
        or (check_type("if", args, 2, QExpr) if len(args) == 3 else None)
    )
    if err:
        return err

    if args[0].as_num() != 0:
        branch = args[1]
    elif len(args) == 3:
        branch = args[2]
    else:
        branch = QExpr()
    return evaluate(env, SExpr(branch.as_values()))
