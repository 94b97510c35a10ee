from collections.abc import Generator
from contextlib import contextmanager

import pytest

from .config import QueryConfig, get_config, reset_config, set_config


@contextmanager
def config_override(**changes: str) -> Generator[QueryConfig, None, None]:
    """Apply config ``changes`` within the context, restoring the old config after."""
    previous = get_config()
    try:
        yield set_config(**changes)
    finally:
        reset_config(previous)


@pytest.fixture()
def toml_query_config() -> Generator[QueryConfig, None, None]:
    """Give the test the current config and undo any changes it makes."""
    with config_override() as config:
        yield config
