"""Runtime environment for MLisp.

The Environment maps symbol names to evaluated values and supports nested
scopes via an `outer` link. Reads walk the chain outwards; writes are either
local (`put`) or global (`define`, which lands in the outermost scope).

Parent links are ordinary object references, so an ancestor scope stays alive
for as long as any scope (or any partially applied lambda) still refers to it.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from mlisp import LispValue
from mlisp.config import Scoping
from mlisp.errors import MLispUnboundSymbol


class Environment:
    """Hierarchical mapping from symbol names to MLisp values."""

    __slots__ = ("vars", "outer", "_scoping")

    def __init__(self, outer: Optional[Environment] = None, scoping: Optional[Scoping] = None):
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer
        # Only meaningful on the global scope; see `scoping`.
        self._scoping: Scoping | None = scoping

    def root(self) -> Environment:
        """Return the outermost (global) environment of this chain."""
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    @property
    def scoping(self) -> Scoping:
        """Scoping discipline of this chain, as configured on the global scope."""
        return self.root()._scoping or Scoping.DYNAMIC

    def get(self, name: str) -> LispValue:
        """Look up the value bound to `name`, searching outwards.

        Raises MLispUnboundSymbol if no scope in the chain binds it.
        """
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env.vars[name]
            env = env.outer
        raise MLispUnboundSymbol(name)

    def put(self, name: str, value: LispValue) -> None:
        """Bind `name` to `value` in this scope only."""
        self.vars[name] = value

    def define(self, name: str, value: LispValue) -> None:
        """Bind `name` to `value` in the global scope."""
        self.root().vars[name] = value

    def reverse_lookup(self, value: LispValue) -> Optional[str]:
        """Return the first name bound to a value equal to `value`, or None."""
        env: Optional[Environment] = self
        while env is not None:
            for name, bound in env.vars.items():
                if bound == value:
                    return name
            env = env.outer
        return None

    def copy(self) -> Environment:
        """Return a parentless environment holding a copy of this scope's bindings."""
        env = Environment()
        env.vars = dict(self.vars)
        return env

    def __contains__(self, name: str) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def __eq__(self, other: object) -> bool:
        # Structural: compares this scope's own bindings, not the chain.
        return isinstance(other, Environment) and self.vars == other.vars

    __hash__ = None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
