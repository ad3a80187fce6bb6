import pytest

from zap.evaluation.evaluator import Evaluator
from zap.interpreter import Interpreter
from zap.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    return Environment.with_builtins()


@pytest.fixture
def evaluator():
    return Evaluator()


@pytest.fixture
def interp(env, evaluator):
    return Interpreter(env, evaluator)
