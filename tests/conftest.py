import pytest

from wyas.interpreter import Interpreter
from wyas.reader.parser import parse


@pytest.fixture
def interp():
    """Interpreter with the default primitive table."""
    return Interpreter()


@pytest.fixture
def read():
    """Parse source that is expected to be well formed."""
    def _read(source):
        return parse(source).unwrap()
    return _read
