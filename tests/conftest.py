import pytest

from argument_checker.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Reload settings from the environment for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
