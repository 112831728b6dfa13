import pytest

from kappa.builtins import new_global_environment
from kappa.evaluation.evaluator import evaluate
from kappa.interpreter import Interpreter
from kappa.reader.parser import parse_one


@pytest.fixture
def env():
    """Fresh global environment with the arithmetic builtins loaded."""
    return new_global_environment()


@pytest.fixture
def interp(monkeypatch):
    """Interpreter with no prelude, isolated from KAPPA_* settings."""
    monkeypatch.delenv("KAPPA_PRELUDE_PATH", raising=False)
    return Interpreter(prelude=None)


@pytest.fixture
def run(env):
    """Parse and evaluate one expression in the shared test environment."""
    def _run(source):
        return evaluate(parse_one(source), env)
    return _run
