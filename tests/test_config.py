import pytest

from toml_query.config import (
    QueryConfig,
    default_separator,
    get_config,
    initial_config,
    load_config_from_env,
    set_config,
)
from toml_query.insert import insert
from toml_query.read import read
from toml_query.testing import config_override


def test_defaults() -> None:
    config = QueryConfig()

    assert config.separator == "."
    assert config.log_level == "WARNING"


def test_load_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TOML_QUERY_SEPARATOR", "/")
    monkeypatch.setenv("TOML_QUERY_LOG_LEVEL", "debug")

    config = load_config_from_env()
    assert config.separator == "/"
    assert config.log_level == "DEBUG"


def test_load_config_ignores_empty_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TOML_QUERY_SEPARATOR", "")

    assert load_config_from_env().separator == "."


@pytest.mark.parametrize("separator", ["", "::"])
def test_invalid_separator_is_rejected(separator: str) -> None:
    with pytest.raises(ValueError):
        QueryConfig(separator=separator)


def test_invalid_log_level_is_rejected() -> None:
    with pytest.raises(ValueError):
        QueryConfig(log_level="LOUD")


def test_set_config_changes_default_separator(toml_query_config) -> None:
    set_config(separator=":")

    assert get_config().separator == ":"
    assert default_separator(None) == ":"
    assert default_separator("/") == "/"


def test_configured_separator_applies_to_operations() -> None:
    doc: dict = {}

    with config_override(separator="/"):
        insert(doc, "a/b.c", 1)
        assert read(doc, "a/b.c") == 1
    assert doc == {"a": {"b.c": 1}}
    assert read(doc, "a.b.c") is None


def test_config_override_restores_previous() -> None:
    before = get_config()

    with config_override(log_level="DEBUG") as config:
        assert config.log_level == "DEBUG"
    assert get_config() is before


def test_invalid_env_falls_back_to_defaults(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setenv("TOML_QUERY_LOG_LEVEL", "LOUD")
    monkeypatch.setenv("TOML_QUERY_SEPARATOR", "/")

    with pytest.raises(ValueError):
        load_config_from_env()
    config = initial_config()
    assert config.log_level == "WARNING"
    assert config.separator == "."
    assert "ignoring TOML_QUERY_* environment settings" in caplog.text
