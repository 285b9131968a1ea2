import logging
from pathlib import Path
from typing import Optional, TextIO

from mlisp import LispValue
from mlisp.builtin import initialize_standard_environment
from mlisp.config import Scoping, get_prelude_files
from mlisp.evaluation.evaluator import evaluate
from mlisp.loader import load_file
from mlisp.printer import to_display_string
from mlisp.reader import read, read_program
from mlisp.types.values import Error

logger = logging.getLogger(__name__)


class Interpreter:
    """
    A session for MLisp code.
    Owns one global environment so definitions persist across inputs.
    """
    def __init__(self, scoping: Optional[Scoping] = None, prelude: bool = True):
        self.env = initialize_standard_environment(scoping)
        logger.debug("interpreter created with %s scoping", self.env.scoping.value)
        if prelude:
            self.load_prelude()

    def load_prelude(self) -> None:
        """Load the configured prelude files into the global environment."""
        for path in get_prelude_files():
            result = load_file(self.env, path)
            if isinstance(result, Error):
                logger.warning("prelude not loaded: %s", result.message)

    def eval(self, code: str) -> LispValue:
        """Evaluate one REPL input; several forms on one line read as one s-expression.

        Raises MLispSyntaxError when `code` cannot be read.
        """
        return evaluate(self.env, read(code))

    def eval_all(self, code: str) -> list[LispValue]:
        """Evaluate every top-level form of `code` in order, returning each result."""
        return [evaluate(self.env, form) for form in read_program(code)]

    def load_file(self, path: str | Path, out: Optional[TextIO] = None) -> LispValue:
        return load_file(self.env, path, out)

    def display(self, value: LispValue) -> str:
        return to_display_string(value, self.env)
