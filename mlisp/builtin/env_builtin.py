"""Environment, evaluation and I/O builtins: \\ fun def = eval load error println."""
from __future__ import annotations

from mlisp import LispValue
from mlisp.builtin.checks import check_len_eq, check_len_ge, check_non_empty, check_type
from mlisp.config import Scoping
from mlisp.evaluation.evaluator import evaluate
from mlisp.loader import load_file
from mlisp.printer import to_output_string
from mlisp.types.environment import Environment
from mlisp.types.lambda_fn import Lambda
from mlisp.types.symbol import Symbol
from mlisp.types.values import Error, QExpr, SExpr, String


def lambda_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(\\ {formals} {body}) => a new function with an empty environment."""
    err = (
        check_len_eq("\\", args, 2)
        or check_type("\\", args, 0, QExpr)
        or check_type("\\", args, 1, QExpr)
    )
    if err:
        return err

    formals, body = args
    for formal in formals.as_values():
        if not isinstance(formal, Symbol):
            return Error(f"cannot use non-symbol as argument: {formal.display(env)}")

    captured = env if env.scoping is Scoping.LEXICAL else None
    return Lambda(formals.as_values(), body.as_values(), captured=captured)


def fun_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(fun {name formals...} {body}): define a named function in the global environment.

    The function is created in the caller's environment, exactly as if
    `\\ {formals...} {body}` had been evaluated there.
    """
    err = (
        check_len_eq("fun", args, 2)
        or check_non_empty("fun", args, 0)
        or check_type("fun", args, 1, QExpr)
    )
    if err:
        return err

    name, *formals = args[0].as_values()
    if not isinstance(name, Symbol):
        return Error(f"cannot define non-symbol: {name.display(env)}")
    fn = lambda_builtin(env, [QExpr(formals), args[1]])
    if isinstance(fn, Error):
        return fn
    env.define(name.name, fn)
    return SExpr()


def _assign(name: str, env: Environment, args: list[LispValue], local: bool) -> LispValue:
    err = check_len_ge(name, args, 1) or check_type(name, args, 0, QExpr)
    if err:
        return err

    symbols = args[0].as_values()
    values = args[1:]
    for symbol in symbols:
        if not isinstance(symbol, Symbol):
            return Error(f"cannot define non-symbol: {symbol.display(env)}")
    if len(symbols) != len(values):
        return Error(
            f"{name} called with number of symbols ({len(symbols)}) "
            f"!= number of values ({len(values)})"
        )

    for symbol, value in zip(symbols, values):
        if local:
            env.put(symbol.name, value)
        else:
            env.define(symbol.name, value)
    return SExpr()


def def_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(def {a b} 1 2): bind in the global environment."""
    return _assign("def", env, args, local=False)


def put_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(= {a b} 1 2): bind in the current environment."""
    return _assign("=", env, args, local=True)


def eval_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(eval {+ 1 2}) => 3"""
    err = check_len_eq("eval", args, 1) or check_type("eval", args, 0, QExpr)
    if err:
        return err
    return evaluate(env, SExpr(args[0].as_values()))


def load_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    err = check_len_eq("load", args, 1) or check_type("load", args, 0, String)
    if err:
        return err
    return load_file(env, args[0].text)


def error_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(error "message") => an error value carrying `message`."""
    err = check_len_eq("error", args, 1) or check_type("error", args, 0, String)
    if err:
        return err
    return Error(args[0].text)


def println_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    print(to_output_string(args, env))
    return SExpr()
