import pytest

from tinylisp.interpreter import Interpreter
from tinylisp.modules.loader import MemoryLoader
from tinylisp.output import BufferWriter


@pytest.fixture
def output():
    """In-memory writer collecting everything print/println/format write."""
    return BufferWriter()


@pytest.fixture
def loader():
    """In-memory file loader; tests register sources with loader.add(name, text)."""
    return MemoryLoader()


@pytest.fixture
def interp(output, loader):
    """Fresh session with fresh closure frames, independent of TINYLISP_* settings."""
    return Interpreter(output, loader, max_depth=10000, shared_frames=False)


@pytest.fixture
def shared_interp(output, loader):
    """Session using the legacy shared closure frame."""
    return Interpreter(output, loader, max_depth=10000, shared_frames=True)
