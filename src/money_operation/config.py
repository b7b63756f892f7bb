"""Library settings loaded from the environment.

Variables (all optional; a `.env` file is read only when passed to `load_settings` and never
overrides the real environment or writes to it):

- `MONEY_OPERATION_LOCALE`: default locale for `format` / `parse` (default "en_US").
- `MONEY_OPERATION_ROUNDING_MODE`: rounding mode name used by callers that ask for the
  configured default (default "HALF_UP").
- `MONEY_OPERATION_SPLIT_TRIES`: default reconciliation budget of `split` (default 10).
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import dotenv_values

from money_operation.domain.monetary.rounding import DEFAULT_ROUNDING_MODE, RoundingMode
from money_operation.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

DEFAULT_LOCALE: str = "en_US"
DEFAULT_SPLIT_TRIES: int = 10

ENV_LOCALE = "MONEY_OPERATION_LOCALE"
ENV_ROUNDING_MODE = "MONEY_OPERATION_ROUNDING_MODE"
ENV_SPLIT_TRIES = "MONEY_OPERATION_SPLIT_TRIES"


@dataclass(frozen=True)
class OperationSettings:
    """Defaults applied when a caller does not pass the value explicitly.

    Attributes:
        default_locale (str): Locale identifier used by `format` / `parse`.
        default_rounding_mode (RoundingMode): Rounding mode offered to callers as the configured default.
        split_tries (int): Reconciliation budget of `split`.
    """

    default_locale: str = DEFAULT_LOCALE
    default_rounding_mode: RoundingMode = DEFAULT_ROUNDING_MODE
    split_tries: int = DEFAULT_SPLIT_TRIES

    def __post_init__(self) -> None:
        """Validate settings.

        Raises:
            InvalidArgumentError: if some values are invalid.
        """
        if not self.default_locale or not self.default_locale.strip():
            raise InvalidArgumentError(f"$default_locale cannot be empty, but provided value is: '{self.default_locale}'")

        if not isinstance(self.default_rounding_mode, RoundingMode):
            raise InvalidArgumentError(f"$default_rounding_mode must be a RoundingMode instance, but provided value is: {self.default_rounding_mode}")

        if self.split_tries < 0:
            raise InvalidArgumentError(f"$split_tries must be >= 0, but provided value is: {self.split_tries}")


def load_settings(env_file: str | os.PathLike | None = None) -> OperationSettings:
    """Build `OperationSettings` from environment variables and an optional `.env` file.

    Args:
        env_file: Path of a `.env` file. If None, only the process environment is read.

    Returns:
        OperationSettings: Loaded settings; missing variables keep their defaults.

    Raises:
        InvalidArgumentError: If a variable holds an invalid value.
    """
    file_values = dotenv_values(env_file) if env_file is not None else {}

    def lookup(key: str) -> str | None:
        # Real environment wins over the file
        return os.environ.get(key) or file_values.get(key)

    locale = lookup(ENV_LOCALE) or DEFAULT_LOCALE

    rounding_mode_name = lookup(ENV_ROUNDING_MODE)
    try:
        rounding_mode = RoundingMode.from_str(rounding_mode_name) if rounding_mode_name else DEFAULT_ROUNDING_MODE
    except ValueError as e:
        raise InvalidArgumentError(f"Cannot call `load_settings` because ${ENV_ROUNDING_MODE} ('{rounding_mode_name}') is not a rounding mode") from e

    split_tries_text = lookup(ENV_SPLIT_TRIES)
    try:
        split_tries = int(split_tries_text) if split_tries_text else DEFAULT_SPLIT_TRIES
    except ValueError as e:
        raise InvalidArgumentError(f"Cannot call `load_settings` because ${ENV_SPLIT_TRIES} ('{split_tries_text}') is not an integer") from e

    settings = OperationSettings(default_locale=locale, default_rounding_mode=rounding_mode, split_tries=split_tries)
    logger.debug(f"Loaded {settings}")
    return settings


@lru_cache(maxsize=1)
def get_settings() -> OperationSettings:
    """Return the process-wide settings, loading them on first use.

    Call `get_settings.cache_clear()` to reload after the environment changed.
    """
    return load_settings()
