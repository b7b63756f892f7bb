import pytest

from money_operation.config import ENV_LOCALE, ENV_ROUNDING_MODE, ENV_SPLIT_TRIES, get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Run every test with default settings; restore the environment afterwards."""
    for key in (ENV_LOCALE, ENV_ROUNDING_MODE, ENV_SPLIT_TRIES):
        monkeypatch.setenv(key, "placeholder")
        monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
