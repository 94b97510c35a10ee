"""Process-wide settings, read once from the environment."""

from __future__ import annotations

import logging
import os

import chz

_SEPARATOR_ENV = "TOML_QUERY_SEPARATOR"
_LOG_LEVEL_ENV = "TOML_QUERY_LOG_LEVEL"


@chz.chz
class QueryConfig:
    separator: str = "."
    log_level: str = "WARNING"

    @chz.validate
    def _check_separator(self) -> None:
        if len(self.separator) != 1:
            raise ValueError(
                f"separator must be a single character, got {self.separator!r}"
            )

    @chz.validate
    def _check_log_level(self) -> None:
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"unknown log level {self.log_level!r}")


def load_config_from_env() -> QueryConfig:
    """Build a config from ``TOML_QUERY_*`` environment variables."""
    changes: dict[str, str] = {}
    separator = os.environ.get(_SEPARATOR_ENV)
    if separator:
        changes["separator"] = separator
    log_level = os.environ.get(_LOG_LEVEL_ENV)
    if log_level:
        changes["log_level"] = log_level.upper()
    return QueryConfig(**changes)


def initial_config() -> QueryConfig:
    """Load the environment config, falling back to defaults if it is invalid."""
    try:
        return load_config_from_env()
    except ValueError as exc:
        logging.getLogger("toml_query").warning(
            "ignoring TOML_QUERY_* environment settings: %s", exc
        )
        return QueryConfig()


TOML_QUERY_CONFIG: QueryConfig = initial_config()


def get_config() -> QueryConfig:
    return TOML_QUERY_CONFIG


def set_config(**changes: str) -> QueryConfig:
    global TOML_QUERY_CONFIG
    TOML_QUERY_CONFIG = chz.replace(TOML_QUERY_CONFIG, **changes)
    return TOML_QUERY_CONFIG


def reset_config(config: QueryConfig) -> None:
    global TOML_QUERY_CONFIG
    TOML_QUERY_CONFIG = config


def default_separator(separator: str | None) -> str:
    """Return ``separator`` or, when it is ``None``, the configured one."""
    if separator is None:
        return TOML_QUERY_CONFIG.separator
    return separator


__all__ = [
    "QueryConfig",
    "TOML_QUERY_CONFIG",
    "default_separator",
    "get_config",
    "initial_config",
    "load_config_from_env",
    "reset_config",
    "set_config",
]
