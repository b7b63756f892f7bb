import os

import pytest

from money_operation.config import (
    DEFAULT_LOCALE,
    DEFAULT_SPLIT_TRIES,
    ENV_LOCALE,
    ENV_ROUNDING_MODE,
    ENV_SPLIT_TRIES,
    OperationSettings,
    get_settings,
    load_settings,
)
from money_operation.domain.monetary.currency_registry import EUR
from money_operation.domain.monetary.money import Money
from money_operation.domain.monetary.rounding import RoundingMode
from money_operation.errors import InvalidArgumentError
from money_operation.operation.operation import Operation


def test_defaults():
    settings = get_settings()
    assert settings.default_locale == DEFAULT_LOCALE == "en_US"
    assert settings.default_rounding_mode is RoundingMode.HALF_UP
    assert settings.split_tries == DEFAULT_SPLIT_TRIES == 10


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv(ENV_LOCALE, "de_DE")
    monkeypatch.setenv(ENV_ROUNDING_MODE, "half_even")
    monkeypatch.setenv(ENV_SPLIT_TRIES, "25")

    settings = load_settings()
    assert settings == OperationSettings("de_DE", RoundingMode.HALF_EVEN, 25)


def test_env_file(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text(f"{ENV_SPLIT_TRIES}=3\n{ENV_LOCALE}=es_ES\n")
    # real environment wins over the file
    monkeypatch.setenv(ENV_LOCALE, "fr_FR")

    settings = load_settings(env_file)
    assert settings.split_tries == 3
    assert settings.default_locale == "fr_FR"
    # the file is read, never exported
    assert os.environ.get(ENV_SPLIT_TRIES) is None


@pytest.mark.parametrize(
    "key, value",
    [
        (ENV_ROUNDING_MODE, "NEAREST"),
        (ENV_SPLIT_TRIES, "many"),
        (ENV_SPLIT_TRIES, "-1"),
    ],
)
def test_invalid_environment(monkeypatch, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(InvalidArgumentError):
        load_settings()


def test_get_settings_is_cached(monkeypatch):
    first = get_settings()
    monkeypatch.setenv(ENV_SPLIT_TRIES, "4")
    assert get_settings() is first

    get_settings.cache_clear()
    assert get_settings().split_tries == 4


def test_stray_env_file_is_ignored(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text(f"{ENV_ROUNDING_MODE}=FLOOR\n{ENV_SPLIT_TRIES}=0\nMONEY_OPERATION_UNRELATED_KEY=leaked\n")
    work_dir = tmp_path / "project" / "src"
    work_dir.mkdir(parents=True)
    monkeypatch.chdir(work_dir)

    assert get_settings() == OperationSettings()
    assert Operation.of_values(288, "EUR").split(5) == [Money(56, EUR)] + [Money(58, EUR)] * 4
    assert Operation.of_values(288, "EUR").percentage_increase("2.99") == Money(297, EUR)
    assert os.environ.get("MONEY_OPERATION_UNRELATED_KEY") is None
    assert os.environ.get(ENV_ROUNDING_MODE) is None
