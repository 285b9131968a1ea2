"""Argument contracts shared by the builtins.

Each check returns None when the contract holds and an Error value otherwise,
so a builtin can chain them with `or` and return the first violation.
"""
from __future__ import annotations

from typing import Optional, Sequence

from mlisp.types.values import Error, QExpr, Value


def check_len_eq(name: str, args: Sequence[Value], expected: int) -> Optional[Error]:
    if len(args) < expected:
        return Error(f"{name} called with too few arguments: expected {expected}, got {len(args)}")
    if len(args) > expected:
        return Error(f"{name} called with too many arguments: expected {expected}, got {len(args)}")
    return None


def check_len_ge(name: str, args: Sequence[Value], expected: int) -> Optional[Error]:
    if len(args) < expected:
        return Error(
            f"{name} called with too few arguments: expected at least {expected}, got {len(args)}"
        )
    return None


def check_len_le(name: str, args: Sequence[Value], expected: int) -> Optional[Error]:
    if len(args) > expected:
        return Error(
            f"{name} called with too many arguments: expected at most {expected}, got {len(args)}"
        )
    return None


def check_type(name: str, args: Sequence[Value], index: int, cls: type[Value]) -> Optional[Error]:
    arg = args[index]
    if not isinstance(arg, cls):
        return Error(
            f"{name} called with wrong type for argument {index + 1}: "
            f"expected {cls.type_name}, got {arg.type_name}"
        )
    return None


def check_all_type(name: str, args: Sequence[Value], cls: type[Value]) -> Optional[Error]:
    for i in range(len(args)):
        err = check_type(name, args, i, cls)
        if err is not None:
            return err
    return None


def check_non_empty(name: str, args: Sequence[Value], index: int) -> Optional[Error]:
    """Argument `index` must be a q-expression with at least one element."""
    err = check_type(name, args, index, QExpr)
    if err is not None:
        return err
    if not args[index].as_values():
        return Error(f"{name} called with empty list")
    return None
