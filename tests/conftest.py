"""Pytest configuration and fixtures."""
import pytest

# local
from ansipaint import Ansi, AnsiConfig


try:
    from pytest_codspeed import BenchmarkFixture  # noqa: F401
except ImportError:
    # Provide a no-op benchmark fixture when pytest-codspeed is not installed
    @pytest.fixture
    def benchmark():
        """No-op benchmark fixture for environments without pytest-codspeed."""
        def _passthrough(func, *args, **kwargs):
            return func(*args, **kwargs)
        return _passthrough


@pytest.fixture
def ansi():
    """A fresh engine with rendering enabled."""
    return Ansi(AnsiConfig(enabled=True))


@pytest.fixture
def ansi_html():
    """A fresh engine with rendering and markup tags enabled."""
    return Ansi(AnsiConfig(enabled=True, html_tags=True))


@pytest.fixture
def ansi_off():
    """A fresh engine with rendering disabled."""
    return Ansi(AnsiConfig())
