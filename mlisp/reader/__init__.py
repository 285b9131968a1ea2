from mlisp.reader.convert import from_ast
from mlisp.reader.parser import lex, parse, parse_program, TokenStream
from mlisp.types.values import Value


def read(source: str, filename: str = "<input>") -> Value:
    """Read REPL input as one value (several forms are wrapped in an s-expression)."""
    return from_ast(parse(source, filename))


def read_program(source: str, filename: str = "<input>") -> list[Value]:
    """Read every top-level form of a source unit."""
    return [from_ast(node) for node in parse_program(source, filename)]


__all__ = ["from_ast", "lex", "parse", "parse_program", "read", "read_program", "TokenStream"]
