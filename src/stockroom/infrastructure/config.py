"""Runtime settings read from the environment.

Sources, lowest priority first:
    1. Defaults derived from ``STOCKROOM_ENV``
    2. ``STOCKROOM_LOG_LEVEL``
    3. Explicit overrides (the CLI ``--log-level`` option)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_DEFAULT_LEVEL_BY_ENV = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


class ConfigError(Exception):
    """Settings could not be resolved."""


@dataclass(frozen=True)
class Settings:
    environment: str = "development"
    log_level: str = "DEBUG"

    @property
    def json_logs(self) -> bool:
        return self.environment in ("production", "staging")


def load_settings(
    environ: Mapping[str, str] | None = None,
    log_level: str | None = None,
) -> Settings:
    environ = os.environ if environ is None else environ

    environment = environ.get("STOCKROOM_ENV", "development").strip().lower()
    level = (
        log_level
        or environ.get("STOCKROOM_LOG_LEVEL")
        or _DEFAULT_LEVEL_BY_ENV.get(environment, "INFO")
    ).strip().upper()

    if level not in _LEVELS:
        raise ConfigError(
            f"Unknown log level {level!r}; expected one of {', '.join(_LEVELS)}"
        )

    return Settings(environment=environment, log_level=level)
