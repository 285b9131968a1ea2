"""Command-line front end: an interactive REPL, or a runner for source files.

    mlisp              start the REPL ('quit' or Ctrl+D exits)
    mlisp FILE...      load each file into a fresh interpreter
"""
import logging
import sys
from typing import Callable, Optional

from mlisp import __version__
from mlisp.config import get_log_level, get_recursion_limit
from mlisp.errors import MLispSyntaxError
from mlisp.interpreter import Interpreter
from mlisp.reader import lex
from mlisp.types.values import Error, SExpr

logger = logging.getLogger(__name__)


def needs_more_input(text: str) -> bool:
    """True while `text` has unclosed brackets or an unterminated string."""
    depth = 0
    try:
        for tok in lex(text):
            if tok.kind in ("lparen", "lbrace"):
                depth += 1
            elif tok.kind in ("rparen", "rbrace"):
                depth -= 1
    except MLispSyntaxError as e:
        # A string literal may continue on the next line.
        return e.message == "unterminated string"
    return depth > 0


def repl(interp: Interpreter, read_line: Callable[[str], str] = input) -> None:
    print(f"MLisp Version {__version__}")
    print("Enter 'quit' to exit")
    print()

    while True:
        try:
            line = read_line("> ")
        except EOFError:
            print()
            break

        # Continuation lines until brackets balance
        try:
            while needs_more_input(line):
                line += "\n" + read_line(". ")
        except EOFError:
            print()
            break

        if line.strip() == "quit":
            break

        try:
            result = interp.eval(line)
        except MLispSyntaxError as e:
            print(f"Error: {e}")
            continue
        except RecursionError:
            logger.debug("recursion limit hit evaluating %r", line)
            print("Error: maximum recursion depth exceeded")
            continue

        # The empty expression `()` is what definitions return; nothing to show.
        if isinstance(result, SExpr) and not result.items:
            continue
        print(interp.display(result))

    print("Exiting...")


def run_files(paths: list[str]) -> int:
    """Load each file into its own interpreter; return the process exit status."""
    status = 0
    for path in paths:
        interp = Interpreter()
        try:
            result = interp.load_file(path)
        except RecursionError:
            print(f"Error: maximum recursion depth exceeded in {path}")
            return 1
        if isinstance(result, Error):
            print(interp.display(result))
            status = 1
    return status


def main(argv: Optional[list[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    sys.setrecursionlimit(get_recursion_limit())

    if argv:
        return run_files(argv)
    repl(Interpreter())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
