import pytest

from tinyscheme.builtin.env_builtin import register
from tinyscheme.interpreter import Interpreter
from tinyscheme.runtime_context import set_strict
from tinyscheme.types.environment import Environment

# Strict mode is process-global. Every test starts and ends with the default
# flat error policy so one test switching it on cannot leak into the next.


@pytest.fixture(autouse=True)
def _reset_strict_mode():
    set_strict(False)
    yield
    set_strict(False)


@pytest.fixture
def env():
    """Fresh global environment with the primitives installed."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()
