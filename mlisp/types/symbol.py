from __future__ import annotations
import sys
from typing import Optional, TYPE_CHECKING

from mlisp.types.values import Value

if TYPE_CHECKING:
    from mlisp.types.environment import Environment

# Formal parameter that collects every remaining argument into a q-expression.
VARIADIC_MARKER = "..."


class Symbol(Value):
    __slots__ = ("name",)

    type_name = "symbol"

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.name = sys.intern(name)

    def as_sym(self) -> str:
        return self.name

    @property
    def is_variadic_marker(self) -> bool:
        return self.name == VARIADIC_MARKER

    def display(self, env: Optional[Environment] = None) -> str:
        return self.name

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"
