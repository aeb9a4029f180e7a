import pytest

from capsim.config.environment import Environment


@pytest.fixture(autouse=True)
def _reset_environment():
    """Make every test re-read .env files instead of sharing cached state."""
    Environment.reset()
    yield
