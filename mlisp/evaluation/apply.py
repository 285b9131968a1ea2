"""Application engine for MLisp.

Centralizes what happens once an s-expression has been reduced to a head and
its evaluated arguments:
- Builtins are invoked with the caller's environment and the argument list.
- Lambdas are bound (currying and `...` capture) and, once every formal is
  bound, their body is evaluated in the new frame.
- Anything else in head position is an error value.
"""

from __future__ import annotations

from typing import Callable

from mlisp import LispValue
from mlisp.types.bind import bind_arguments
from mlisp.types.environment import Environment
from mlisp.types.lambda_fn import Lambda, body_as_sexpr
from mlisp.types.values import Builtin, Error

EvaluatorFn = Callable[[Environment, LispValue], LispValue]


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a user-defined Lambda to already-evaluated arguments.

    Parameters:
    - fn: The Lambda being applied. It is never mutated.
    - args: The evaluated argument values.
    - env: The environment active at the call site.
    - evaluate_fn: Evaluator used to run the body.

    Behavior:
    - Too few arguments return a partially applied Lambda.
    - Too many arguments, or a malformed `...`, return an Error.
    - Otherwise the new frame is linked to its parent and the body is
      evaluated there. The parent is the lambda's creation environment when
      it was created under lexical scoping, else the caller's environment.
    """
    bound = bind_arguments(fn, args)
    if not isinstance(bound, Environment):
        return bound

    bound.outer = fn.captured if fn.captured is not None else env
    return evaluate_fn(bound, body_as_sexpr(fn))


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply the evaluated head of an s-expression to its arguments."""
    match head:
        case Builtin():
            return head(env, args)
        case Lambda():
            return apply_lambda(head, args, env, evaluate_fn)
        case _:
            return Error("first element is not a function")
