import pytest

from mlisp.builtin import initialize_standard_environment
from mlisp.config import Scoping
from mlisp.evaluation.evaluator import evaluate
from mlisp.reader import read

# Most of the language behaves identically whether a lambda's frame is linked
# to the caller's environment (dynamic) or to its creation environment
# (lexical). The `env` fixture therefore runs each test once per discipline;
# tests that tell the two apart build their environments explicitly.


@pytest.fixture(params=[Scoping.DYNAMIC, Scoping.LEXICAL], ids=lambda s: s.value)
def scoping(request):
    return request.param


@pytest.fixture
def env(scoping):
    """Fresh global environment with builtins loaded."""
    return initialize_standard_environment(scoping)


@pytest.fixture
def run(env):
    """Evaluate one line of source in the shared `env`, as the REPL would."""
    def _run(source: str):
        return evaluate(env, read(source))
    return _run
