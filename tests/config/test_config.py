from __future__ import annotations

import os

import pytest

from gqlsource.config import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_CREATE_NODES_CONCURRENCY,
    DEFAULT_TYPE_PREFIX,
    ConfigurationError,
    MissingConfigurationError,
    env_flag,
    env_int,
    get_ingest_settings,
    get_source_config,
    require_env_var,
    require_env_vars,
)


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "value")

    result = require_env_vars(["EXAMPLE_VAR"])

    assert result["EXAMPLE_VAR"] == "value"


def test_require_env_vars_raises_when_any_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MISSING_VAR", raising=False)

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["MISSING_VAR"])

    assert "MISSING_VAR" in str(exc.value)


def test_require_env_var_handles_blank_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")

    with pytest.raises(MissingConfigurationError):
        require_env_var("EXAMPLE_VAR")


def test_require_env_vars_restores_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEMP_VAR", "123")

    assert os.getenv("TEMP_VAR") == "123"
    result = require_env_var("TEMP_VAR")
    assert result == "123"


def test_env_int_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("EXAMPLE_INT", raising=False)

    assert env_int("EXAMPLE_INT", 7) == 7


@pytest.mark.parametrize("raw", ["zero", "0", "-3"])
def test_env_int_rejects_invalid_values(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("EXAMPLE_INT", raw)

    with pytest.raises(ConfigurationError) as exc:
        env_int("EXAMPLE_INT", 7)

    assert "EXAMPLE_INT" in str(exc.value)


def test_env_flag_accepts_common_truthy_spellings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_FLAG", "Yes")
    assert env_flag("EXAMPLE_FLAG") is True

    monkeypatch.setenv("EXAMPLE_FLAG", "nope")
    assert env_flag("EXAMPLE_FLAG") is False


def test_ingest_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "GQLSOURCE_CONCURRENT_DOWNLOAD",
        "GQLSOURCE_CREATE_NODES_CONCURRENCY",
        "GQLSOURCE_VERBOSE",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = get_ingest_settings()

    assert settings.batch_size == DEFAULT_BATCH_SIZE
    assert settings.create_nodes_concurrency == DEFAULT_CREATE_NODES_CONCURRENCY
    assert settings.page_size == 100
    assert settings.verbose is False


def test_ingest_settings_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GQLSOURCE_CONCURRENT_DOWNLOAD", "5")
    monkeypatch.setenv("GQLSOURCE_CREATE_NODES_CONCURRENCY", "4")
    monkeypatch.setenv("GQLSOURCE_VERBOSE", "1")

    settings = get_ingest_settings()

    assert settings.batch_size == 5
    assert settings.create_nodes_concurrency == 4
    assert settings.verbose is True


def test_source_config_requires_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GQLSOURCE_URL", raising=False)

    with pytest.raises(MissingConfigurationError):
        get_source_config()


def test_source_config_builds_bearer_header(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GQLSOURCE_URL", " https://cms.test/graphql ")
    monkeypatch.setenv("GQLSOURCE_AUTH_TOKEN", "secret")
    monkeypatch.delenv("GQLSOURCE_TYPE_PREFIX", raising=False)

    config = get_source_config()

    assert config.url == "https://cms.test/graphql"
    assert config.type_prefix == DEFAULT_TYPE_PREFIX
    headers = config.resilience.default_headers
    assert headers is not None
    assert headers["Authorization"] == "Bearer secret"
    assert config.resilience.ratelimit is not None
    assert "POST" in config.resilience.retry.allowed_methods


def test_source_config_without_token_has_no_auth_header(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GQLSOURCE_URL", "https://cms.test/graphql")
    monkeypatch.delenv("GQLSOURCE_AUTH_TOKEN", raising=False)
    monkeypatch.setenv("GQLSOURCE_TYPE_PREFIX", "Cms")

    config = get_source_config()

    assert config.type_prefix == "Cms"
    headers = config.resilience.default_headers
    assert headers is not None
    assert "Authorization" not in headers


def test_missing_configuration_is_a_configuration_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MISSING_VAR", raising=False)

    with pytest.raises(ConfigurationError):
        require_env_var("MISSING_VAR")
