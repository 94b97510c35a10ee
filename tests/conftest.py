import textwrap
import tomllib
from collections.abc import Callable
from typing import Any

import pytest

from toml_query.testing import toml_query_config  # noqa: F401


@pytest.fixture()
def toml_doc() -> Callable[[str], dict[str, Any]]:
    """Parse a TOML snippet into a document value."""

    def load(text: str) -> dict[str, Any]:
        return tomllib.loads(textwrap.dedent(text))

    return load
