"""Rendering of values for the REPL, `println` and error reports."""
from __future__ import annotations

from typing import Iterable, Optional

from mlisp.types.environment import Environment
from mlisp.types.values import String, Value


def to_display_string(value: Value, env: Optional[Environment] = None) -> str:
    """Conventional printed form of `value`.

    `env` is only read: builtins are shown under the name they are bound to there.
    """
    return value.display(env)


def to_output_string(values: Iterable[Value], env: Optional[Environment] = None) -> str:
    """Space-joined display of `values`, with strings written without quotes."""
    return " ".join(v.text if isinstance(v, String) else v.display(env) for v in values)
