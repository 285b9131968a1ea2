from mlisp.types.values import Value, Number, Error, String, SExpr, QExpr, Builtin, format_number
from mlisp.types.symbol import Symbol, VARIADIC_MARKER
from mlisp.types.environment import Environment
from mlisp.types.lambda_fn import Lambda

__all__ = [
    "Value",
    "Number",
    "Error",
    "String",
    "Symbol",
    "SExpr",
    "QExpr",
    "Lambda",
    "Builtin",
    "Environment",
    "VARIADIC_MARKER",
    "format_number",
]
