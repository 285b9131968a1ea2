"""Value variants for MLisp.

Every runtime datum is one of a closed set of variants: Number, Error, Symbol,
String, SExpr, QExpr, Lambda and Builtin. Symbol and Lambda live in their own
modules; this module holds the base class and the remaining variants.

Equality is structural and variant-aware: values of different variants never
compare equal. Display takes an optional environment, used only to render
builtins by name; it never mutates that environment.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional, TYPE_CHECKING

from mlisp.errors import MLispConversionError

if TYPE_CHECKING:
    from mlisp.types.environment import Environment


class Value:
    """Base class of every MLisp value."""

    __slots__ = ()

    type_name = "value"

    # --- Conversions ---
    # Callers check the variant first; reaching the base implementation is a defect.
    def as_values(self) -> tuple[Value, ...]:
        raise MLispConversionError(f"{type(self).__name__}.as_values(self={self!r})")

    def as_num(self) -> float:
        raise MLispConversionError(f"{type(self).__name__}.as_num(self={self!r})")

    def as_sym(self) -> str:
        raise MLispConversionError(f"{type(self).__name__}.as_sym(self={self!r})")

    # --- Display ---
    def display(self, env: Optional[Environment] = None) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.display()


def format_number(value: float) -> str:
    """Render a float as its decimal value, dropping a zero fractional part.

    Integral values beyond float precision keep Python's exponent form (`1e+300`).
    """
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


class Number(Value):
    __slots__ = ("value",)

    type_name = "number"

    def __init__(self, value: float):
        self.value: float = float(value)

    def as_num(self) -> float:
        return self.value

    def display(self, env: Optional[Environment] = None) -> str:
        return format_number(self.value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Number) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self):
        return f"Number({self.value!r})"


class Error(Value):
    """A first-class failure value. Never mutated after creation."""

    __slots__ = ("message",)

    type_name = "error"

    def __init__(self, message: str):
        self.message: str = message

    def display(self, env: Optional[Environment] = None) -> str:
        return f"Error: {self.message}"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Error) and self.message == other.message

    def __hash__(self) -> int:
        return hash(("error", self.message))

    def __repr__(self):
        return f"Error({self.message!r})"


_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t"}


class String(Value):
    __slots__ = ("text",)

    type_name = "string"

    def __init__(self, text: str):
        self.text: str = text

    def display(self, env: Optional[Environment] = None) -> str:
        return '"' + "".join(_ESCAPES.get(c, c) for c in self.text) + '"'

    def __eq__(self, other: object) -> bool:
        return isinstance(other, String) and self.text == other.text

    def __hash__(self) -> int:
        return hash(("string", self.text))

    def __repr__(self):
        return f"String({self.text!r})"


class _ListValue(Value):
    """Shared implementation of the two list variants."""

    __slots__ = ("items",)

    open_bracket = "("
    close_bracket = ")"

    def __init__(self, items: Iterable[Value] = ()):
        self.items: tuple[Value, ...] = tuple(items)

    def as_values(self) -> tuple[Value, ...]:
        return self.items

    def display(self, env: Optional[Environment] = None) -> str:
        inner = " ".join(item.display(env) for item in self.items)
        return f"{self.open_bracket}{inner}{self.close_bracket}"

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and self.items == other.items

    def __repr__(self):
        return f"{type(self).__name__}({list(self.items)!r})"


class SExpr(_ListValue):
    """An evaluable list: evaluating it performs a function call."""

    __slots__ = ()

    type_name = "s-expression"


class QExpr(_ListValue):
    """A quoted list: inert, self-evaluating data."""

    __slots__ = ()

    type_name = "q-expression"
    open_bracket = "{"
    close_bracket = "}"


class Builtin(Value):
    """A reference to one native operation, compared by identity of the operation."""

    __slots__ = ("name", "fn")

    type_name = "builtin function"

    def __init__(self, name: str, fn: Callable[[Environment, list[Value]], Value]):
        self.name = name
        self.fn = fn

    def __call__(self, env: Environment, args: list[Value]) -> Value:
        return self.fn(env, args)

    def display(self, env: Optional[Environment] = None) -> str:
        if env is not None:
            name = env.reverse_lookup(self)
            if name is not None:
                return name
        return "<function>"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Builtin) and self.fn is other.fn

    def __hash__(self) -> int:
        return id(self.fn)

    def __repr__(self):
        return f"Builtin({self.name!r})"
