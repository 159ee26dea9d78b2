from __future__ import annotations

import pytest

from vapisync.config import (
    VAPI_BASE_URL,
    ConfigurationError,
    MissingConfigurationError,
    build_resilience_config,
    get_vapi_config,
    optional_env_float,
    require_env_vars,
)


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "value")

    result = require_env_vars(["EXAMPLE_VAR"])

    assert result["EXAMPLE_VAR"] == "value"


def test_require_env_vars_reports_every_missing_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MISSING_A", raising=False)
    monkeypatch.setenv("MISSING_B", "   ")

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["MISSING_B", "MISSING_A"])

    assert exc.value.names == ("MISSING_A", "MISSING_B")
    assert "MISSING_A, MISSING_B" in str(exc.value)


def test_optional_env_float_defaults_when_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("EXAMPLE_TIMEOUT", raising=False)

    assert optional_env_float("EXAMPLE_TIMEOUT", default=7.5) == 7.5


@pytest.mark.parametrize("raw", ["abc", "0", "-3"])
def test_optional_env_float_rejects_invalid_values(
    monkeypatch: pytest.MonkeyPatch, raw: str
) -> None:
    monkeypatch.setenv("EXAMPLE_TIMEOUT", raw)

    with pytest.raises(ConfigurationError):
        optional_env_float("EXAMPLE_TIMEOUT", default=1.0)


@pytest.mark.usefixtures("vapi_env")
def test_get_vapi_config_uses_defaults() -> None:
    config = get_vapi_config()

    assert config.base_url == VAPI_BASE_URL
    assert config.token == "test-token"
    assert config.resilience.base_url == f"{VAPI_BASE_URL}/"
    assert config.resilience.timeout_seconds == 30.0
    assert config.resilience.default_headers is not None
    assert config.resilience.default_headers["Authorization"] == "Bearer test-token"


@pytest.mark.usefixtures("vapi_env")
def test_get_vapi_config_reads_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VAPI_URL", "https://vapi.internal.example.com/")
    monkeypatch.setenv("VAPI_TIMEOUT_SECONDS", "12.5")

    config = get_vapi_config()

    assert config.resilience.base_url == "https://vapi.internal.example.com/"
    assert config.resilience.timeout_seconds == 12.5


def test_get_vapi_config_requires_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("VAPI_TOKEN", raising=False)

    with pytest.raises(MissingConfigurationError) as exc:
        get_vapi_config()

    assert "VAPI_TOKEN" in str(exc.value)


@pytest.mark.usefixtures("vapi_env")
def test_vapi_config_repr_masks_token() -> None:
    config = get_vapi_config()

    assert "test-token" not in repr(config)


def test_default_retry_policy_never_retries_writes() -> None:
    resilience = build_resilience_config(base_url=VAPI_BASE_URL, token="t")

    assert resilience.retry.allowed_methods == frozenset({"GET", "DELETE"})
    assert resilience.ratelimit is not None
