# Core type aliases for MLisp.
# Every runtime datum is an instance of one of the Value variants defined in
# mlisp.types.values; the aliases below are used in signatures across the
# evaluator and builtins.
#
# Naming guidance:
# - LispValue: an evaluated (or self-evaluating) runtime value.
# - BuiltinFn: the native signature shared by every builtin operation.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any

# Native builtin signature: (environment, evaluated arguments) -> value
BuiltinFn = Callable[[Any, list], LispValue]
