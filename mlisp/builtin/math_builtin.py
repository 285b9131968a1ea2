"""Arithmetic builtins: + - * / % min max."""
from __future__ import annotations

import math
import operator
from typing import Callable

from mlisp import LispValue
from mlisp.builtin.checks import check_all_type, check_len_ge
from mlisp.types.environment import Environment
from mlisp.types.values import Error, Number


def _fmod(x: float, y: float) -> float:
    # C fmod: the result takes the sign of the dividend
    return math.fmod(x, y) if math.isfinite(x) else math.nan


_OPERATORS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "%": _fmod,
    "min": min,
    "max": max,
}


def arithmetic(op: str, args: list[LispValue]) -> LispValue:
    """Fold `op` left-to-right over one or more numbers.

    A single argument is returned unchanged, except for `-` which negates it.
    Dividing (or taking the modulo) by zero yields an error value.
    """
    err = check_all_type(op, args, Number) or check_len_ge(op, args, 1)
    if err:
        return err

    x = args[0].as_num()
    if len(args) == 1:
        return Number(-x) if op == "-" else args[0]

    fn = _OPERATORS[op]
    for arg in args[1:]:
        y = arg.as_num()
        if op in ("/", "%") and y == 0:
            return Error("division by zero!")
        x = fn(x, y)
    return Number(x)


def add(env: Environment, args: list[LispValue]) -> LispValue:
    return arithmetic("+", args)


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    return arithmetic("-", args)


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    return arithmetic("*", args)


def div(env: Environment, args: list[LispValue]) -> LispValue:
    return arithmetic("/", args)


def mod(env: Environment, args: list[LispValue]) -> LispValue:
    return arithmetic("%", args)


def minimum(env: Environment, args: list[LispValue]) -> LispValue:
    return arithmetic("min", args)


def maximum(env: Environment, args: list[LispValue]) -> LispValue:
    return arithmetic("max", args)
