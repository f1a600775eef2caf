import pytest

from lispc.types.environment import Environment
from lispc.builtin.env_builtin import register
from lispc.interpreter import Interpreter


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
def run(interp):
    """Evaluate a line in one shared session and return the rendered result."""
    def _run(source: str) -> str:
        return str(interp.eval(source))
    return _run
