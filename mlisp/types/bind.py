from __future__ import annotations

import logging
from typing import Sequence

from mlisp import LispValue
from mlisp.types.environment import Environment
from mlisp.types.lambda_fn import Lambda
from mlisp.types.symbol import Symbol
from mlisp.types.values import Error, QExpr

logger = logging.getLogger(__name__)


def variadic_is_well_formed(formals: Sequence[Symbol], index: int) -> bool:
    """The marker at `index` must be followed by exactly one (non-marker) symbol."""
    return index + 2 == len(formals) and not formals[index + 1].is_variadic_marker


def bind_arguments(fn: Lambda, args: Sequence[LispValue]) -> Environment | Lambda | Error:
    """
    Single source of truth for lambda-list binding in MLisp.

    Binds `args` to `fn.formals` pairwise into a fresh copy of the lambda's own
    environment. Supports:
    - Positional parameters
    - `...` followed by one name, capturing every remaining argument as a
      q-expression (an empty one when no arguments remain)
    - Partial application: when arguments run out before the formals do, a new
      Lambda owning the partially filled environment is returned

    Returns the filled Environment (parent not yet linked) when every formal is
    bound, a partially applied Lambda, or an Error value.
    """
    formals = fn.formals
    local_env = fn.env.copy()
    f = 0  # cursor into formals
    a = 0  # cursor into args

    while a < len(args):
        if f >= len(formals):
            return Error("too many arguments")
        formal = formals[f]
        if formal.is_variadic_marker:
            if not variadic_is_well_formed(formals, f):
                return Error("invalid function arguments")
            local_env.put(formals[f + 1].name, QExpr(args[a:]))
            f = len(formals)
            a = len(args)
            break
        local_env.put(formal.name, args[a])
        f += 1
        a += 1

    # Arguments exhausted: an unconsumed variadic marker binds an empty list.
    if f < len(formals) and formals[f].is_variadic_marker:
        if not variadic_is_well_formed(formals, f):
            return Error("invalid function arguments")
        local_env.put(formals[f + 1].name, QExpr())
        f = len(formals)

    if f < len(formals):
        logger.debug("partial application: %d of %d formals bound", f, len(formals))
        return Lambda(formals[f:], fn.body, local_env, fn.captured)

    return local_env
