from io import StringIO

import pytest

from minischeme.interpreter import Interpreter
from minischeme.types.environment import Environment
from minischeme.builtin.env_builtin import register


@pytest.fixture
def out():
    return StringIO()


@pytest.fixture
def itp(out):
    """Fresh interpreter whose print/write output is captured in `out`."""
    return Interpreter(out=out)


@pytest.fixture
def env():
    """Fresh top-level environment with special forms and builtins loaded."""
    e = Environment()
    register(e)
    return e


