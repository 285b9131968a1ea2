"""Loading of source units: read every top-level form, evaluate each in turn."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, TextIO

from mlisp import LispValue
from mlisp.errors import MLispSyntaxError
from mlisp.evaluation.evaluator import evaluate
from mlisp.printer import to_display_string
from mlisp.reader import read_program
from mlisp.types.environment import Environment
from mlisp.types.values import Error, SExpr

logger = logging.getLogger(__name__)


def load_source(
    env: Environment, source: str, filename: str = "<input>", out: Optional[TextIO] = None
) -> LispValue:
    """Evaluate every form of `source` in `env`, printing the ones that yield errors.

    Returns `()`, or an Error when the source cannot be read.
    """
    try:
        forms = read_program(source, filename)
    except MLispSyntaxError as e:
        return Error(f"could not load file: {e}")

    logger.debug("loading %d forms from %s", len(forms), filename)
    for form in forms:
        result = evaluate(env, form)
        if isinstance(result, Error):
            print(to_display_string(result, env), file=out)
    return SExpr()


def load_file(env: Environment, path: str | Path, out: Optional[TextIO] = None) -> LispValue:
    try:
        source = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        return Error(f"could not load file: {path}: {e.strerror}")
    return load_source(env, source, str(path), out)
