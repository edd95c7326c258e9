"""Unit tests for client settings and the env / .env loaders."""

from __future__ import annotations

import os
import pathlib

import pytest

from onfido_sdk.config import (
    ClientSettings,
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

_ENV_KEYS = (
    "ONFIDO_API_TOKEN",
    "ONFIDO_REGION",
    "ONFIDO_RETRIES",
    "ONFIDO_RETRY_WAIT",
    "ONFIDO_TIMEOUT",
    "ONFIDO_USER_AGENT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# ClientSettings validation
# ---------------------------------------------------------------------------


class TestClientSettings:
    def test_defaults(self) -> None:
        settings = ClientSettings(api_token="tok")
        assert settings.region == "eu"
        assert settings.retries == 0
        assert settings.retry_wait is None
        assert settings.timeout == 30.0
        assert settings.user_agent is None

    def test_empty_token_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            ClientSettings(api_token="")
        assert exc_info.value.fields == {"api_token": ["is required"]}

    def test_region_is_normalised(self) -> None:
        assert ClientSettings(api_token="tok", region="US").region == "us"

    def test_unknown_region_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            ClientSettings(api_token="tok", region="mars")
        assert exc_info.value.setting_name == "region"

    def test_negative_retries_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            ClientSettings(api_token="tok", retries=-1)

    def test_negative_wait_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            ClientSettings(api_token="tok", retries=1, retry_wait=-0.5)

    def test_non_positive_timeout_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            ClientSettings(api_token="tok", timeout=0)

    def test_retries_without_wait_default_to_two_seconds(self) -> None:
        assert ClientSettings(api_token="tok", retries=3).effective_retry_wait == 2.0

    def test_no_retries_no_wait(self) -> None:
        assert ClientSettings(api_token="tok").effective_retry_wait == 0.0

    def test_explicit_wait_wins(self) -> None:
        assert ClientSettings(api_token="tok", retries=3, retry_wait=0.25).effective_retry_wait == 0.25


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_all_fields(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ONFIDO_API_TOKEN", "api_sandbox.abc")
        monkeypatch.setenv("ONFIDO_REGION", "ca")
        monkeypatch.setenv("ONFIDO_RETRIES", "4")
        monkeypatch.setenv("ONFIDO_RETRY_WAIT", "1.5")
        monkeypatch.setenv("ONFIDO_TIMEOUT", "10")
        settings = EnvSettingsLoader().load(ClientSettings)
        assert settings.api_token == "api_sandbox.abc"
        assert settings.region == "ca"
        assert settings.retries == 4
        assert settings.retry_wait == 1.5
        assert settings.timeout == 10.0

    def test_missing_token_raises(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(ClientSettings)
        assert exc_info.value.setting_name == "ONFIDO_API_TOKEN"

    def test_empty_token_counts_as_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ONFIDO_API_TOKEN", "")
        with pytest.raises(MissingRequiredSettingError):
            EnvSettingsLoader().load(ClientSettings)

    def test_bad_int_raises_invalid_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ONFIDO_API_TOKEN", "tok")
        monkeypatch.setenv("ONFIDO_RETRIES", "many")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(ClientSettings)
        assert exc_info.value.setting_name == "ONFIDO_RETRIES"

    def test_validation_error_propagates(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ONFIDO_API_TOKEN", "tok")
        monkeypatch.setenv("ONFIDO_REGION", "mars")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(ClientSettings)


# ---------------------------------------------------------------------------
# DotenvSettingsLoader
# ---------------------------------------------------------------------------


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, tmp_path: pathlib.Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("ONFIDO_API_TOKEN=from-file\nONFIDO_REGION=us\n")
        settings = DotenvSettingsLoader(str(env_file)).load(ClientSettings)
        assert settings.api_token == "from-file"
        assert settings.region == "us"
        assert "ONFIDO_API_TOKEN" not in os.environ

    def test_override_prefers_file(self, tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("ONFIDO_API_TOKEN=from-file\n")
        monkeypatch.setenv("ONFIDO_API_TOKEN", "from-env")
        settings = DotenvSettingsLoader(str(env_file), override=True).load(ClientSettings)
        assert settings.api_token == "from-file"

    def test_environment_wins_without_override(
        self, tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("ONFIDO_API_TOKEN=from-file\n")
        monkeypatch.setenv("ONFIDO_API_TOKEN", "from-env")
        settings = DotenvSettingsLoader(str(env_file)).load(ClientSettings)
        assert settings.api_token == "from-env"
