import pytest

from mola.builtin.env_builtin import register
from mola.interpreter import Interpreter
from mola.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture(autouse=True)
def _clean_mola_env(monkeypatch):
    # Keep user settings out of the tests
    for var in ("MOLA_PROMPT", "MOLA_LOG_LEVEL", "MOLA_MAX_DEPTH", "MOLA_HISTORY_FILE"):
        monkeypatch.delenv(var, raising=False)
