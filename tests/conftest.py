import pytest

from risp.builtin import register
from risp.evaluation import evaluate
from risp.interpreter import Interpreter
from risp.reader import read
from risp.types import Environment


@pytest.fixture
def env():
    """A fresh global environment holding only the primitives."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def bare():
    """Interpreter without the prelude."""
    return Interpreter(prelude=None)


@pytest.fixture
def interp():
    """Interpreter with the shipped prelude loaded."""
    return Interpreter()


@pytest.fixture
def run(env):
    """Evaluate every form of a source string in `env`, returning the last value."""
    def _run(source: str):
        result = None
        for form in read(source):
            result = evaluate(form, env)
        return result
    return _run
