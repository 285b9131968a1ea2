"""User-defined function (lambda) representation for MLisp."""

from __future__ import annotations

from typing import Iterable, Optional

from mlisp.types.environment import Environment
from mlisp.types.symbol import Symbol
from mlisp.types.values import Value, QExpr, SExpr, _ListValue


class Lambda(Value):
    """A first-class lambda with formal parameters, body, and its own environment.

    `env` holds the arguments bound so far by partial application and is owned
    by this lambda; calls copy it rather than writing into it. `captured` is the
    environment the lambda was created in and is only consulted under lexical
    scoping.
    """

    __slots__ = ("env", "formals", "body", "captured")

    type_name = "function"

    def __init__(
        self,
        formals: Iterable[Symbol],
        body: Iterable[Value],
        env: Environment | None = None,
        captured: Environment | None = None,
    ):
        self.formals: tuple[Symbol, ...] = tuple(formals)
        self.body: tuple[Value, ...] = tuple(body)
        # Avoid shared default Environment across instances
        self.env: Environment = env if env is not None else Environment()
        self.captured: Environment | None = captured

    def _substitute(self, value: Value) -> Value:
        """Copy of `value` with symbols bound in this lambda's env replaced by their values."""
        if isinstance(value, Symbol) and value.name in self.env:
            return self.env.get(value.name)
        if isinstance(value, _ListValue):
            return type(value)(self._substitute(v) for v in value.items)
        return value

    def display(self, env: Optional[Environment] = None) -> str:
        formals = QExpr(self.formals).display(env)
        body = QExpr(self._substitute(v) for v in self.body).display(env)
        return f"\\ {formals} {body}"

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Lambda)
            and self.formals == other.formals
            and self.body == other.body
            and self.env == other.env
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"Lambda({list(self.formals)!r}, {list(self.body)!r}, env={self.env})"


def body_as_sexpr(fn: Lambda) -> SExpr:
    """The lambda body as the evaluable list it is run as."""
    return SExpr(fn.body)
