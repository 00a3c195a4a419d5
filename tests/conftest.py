import pytest

from clojette.builtins import register
from clojette.evaluation.evaluator import evaluate
from clojette.interpreter import Interpreter
from clojette.reader.parser import read_forms
from clojette.types.environment import Environment
from clojette.types.literal import NIL


@pytest.fixture
def env():
    """A fresh root environment holding the primitive table."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def run(env):
    """Read and evaluate every form of a source string, returning the last value."""
    def _run(source: str):
        result = NIL
        for expr in read_forms(source):
            result = evaluate(expr, env)
        return result
    return _run


@pytest.fixture
def interp():
    return Interpreter()
