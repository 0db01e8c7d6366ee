import pytest

from lispy.builtin.env_builtin import register
from lispy.interpreter import Interpreter
from lispy.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def lisp(interp):
    """Evaluate one line of input and return the rendered result."""
    def run(code: str) -> str:
        return interp.eval_to_str(code)
    return run
