"""List builtins operating on q-expressions: list head tail join cons."""
from __future__ import annotations

from mlisp import LispValue
from mlisp.builtin.checks import check_all_type, check_len_eq, check_len_ge, check_non_empty, check_type
from mlisp.types.environment import Environment
from mlisp.types.values import QExpr


def list_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    return QExpr(args)


def head(env: Environment, args: list[LispValue]) -> LispValue:
    """(head {a b c}) => {a}"""
    err = check_len_eq("head", args, 1) or check_non_empty("head", args, 0)
    if err:
        return err
    return QExpr(args[0].as_values()[:1])


def tail(env: Environment, args: list[LispValue]) -> LispValue:
    """(tail {a b c}) => {b c}"""
    err = check_len_eq("tail", args, 1) or check_non_empty("tail", args, 0)
    if err:
        return err
    return QExpr(args[0].as_values()[1:])


def join(env: Environment, args: list[LispValue]) -> LispValue:
    err = check_len_ge("join", args, 1) or check_all_type("join", args, QExpr)
    if err:
        return err
    items = []
    for arg in args:
        items.extend(arg.as_values())
    return QExpr(items)


def cons(env: Environment, args: list[LispValue]) -> LispValue:
    """(cons x {a b}) => {x a b}"""
    err = check_len_eq("cons", args, 2) or check_type("cons", args, 1, QExpr)
    if err:
        return err
    return QExpr((args[0], *args[1].as_values()))
