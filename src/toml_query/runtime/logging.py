from __future__ import annotations

import logging

from rich.logging import RichHandler

from ..config import get_config

LOGGER_NAME = "toml_query"


class _TomlQueryRichHandler(RichHandler):
    """Console handler owned by toml_query, so repeated setup can find it."""


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a rich console handler to the ``toml_query`` logger.

    Safe to call repeatedly; only one handler is ever installed. ``level``
    defaults to the configured ``log_level``.
    """
    logger = get_logger()
    logger.setLevel((level or get_config().log_level).upper())

    if not any(isinstance(h, _TomlQueryRichHandler) for h in logger.handlers):
        handler = _TomlQueryRichHandler(
            show_time=False,
            show_path=True,
            markup=False,
            rich_tracebacks=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    return logger
