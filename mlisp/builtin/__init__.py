"""Builtin registry: every native operation under its canonical name."""
from __future__ import annotations

from typing import Optional

from mlisp.builtin import conditions_builtin, env_builtin, list_builtin, math_builtin
from mlisp.config import Scoping, get_scoping
from mlisp.types.environment import Environment
from mlisp.types.values import Builtin

BUILTINS = {
    # Environment
    "\\": env_builtin.lambda_builtin,
    "fun": env_builtin.fun_builtin,
    "def": env_builtin.def_builtin,
    "=": env_builtin.put_builtin,
    "eval": env_builtin.eval_builtin,
    "load": env_builtin.load_builtin,
    "error": env_builtin.error_builtin,
    "println": env_builtin.println_builtin,
    # Conditions
    "<": conditions_builtin.lt,
    "<=": conditions_builtin.le,
    ">=": conditions_builtin.ge,
    ">": conditions_builtin.gt,
    "==": conditions_builtin.equals,
    "!=": conditions_builtin.not_equals,
    "if": conditions_builtin.if_builtin,
    "and": conditions_builtin.logical_and,
    "or": conditions_builtin.logical_or,
    "not": conditions_builtin.logical_not,
    # Lists
    "head": list_builtin.head,
    "tail": list_builtin.tail,
    "list": list_builtin.list_builtin,
    "join": list_builtin.join,
    "cons": list_builtin.cons,
    # Math
    "+": math_builtin.add,
    "-": math_builtin.sub,
    "*": math_builtin.mul,
    "/": math_builtin.div,
    "%": math_builtin.mod,
    "min": math_builtin.minimum,
    "max": math_builtin.maximum,
}


def register(env: Environment) -> None:
    """Bind every builtin in `env`."""
    for name, fn in BUILTINS.items():
        env.put(name, Builtin(name, fn))


def initialize_standard_environment(scoping: Optional[Scoping] = None) -> Environment:
    """A fresh global environment holding every builtin.

    `scoping` defaults to the MLISP_SCOPING configuration.
    """
    env = Environment(scoping=scoping if scoping is not None else get_scoping())
    register(env)
    return env
