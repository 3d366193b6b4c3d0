"""Unit tests for DispatchSettings and the env/dotenv loaders."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

import pytest

from cq_dispatch.config import (
    ConfigError,
    DispatchSettings,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    Settings,
)
from cq_dispatch.resolution import Lifetime

_CQD_KEYS = ("CQD_HANDLER_LIFETIME", "CQD_DISPATCHER_LIFETIME", "CQD_LOG_LEVEL", "CQD_JSON_LOGS")


@dataclass
class WorkerSettings(Settings):
    _prefix: ClassVar[str] = "WORKER"

    name: str
    concurrency: int = 4
    ratio: float = 0.5
    queues: list[str] = field(default_factory=list)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for key in _CQD_KEYS:
        # setenv first so undo also removes keys a test (or load_dotenv) adds
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch


class TestDispatchSettings:
    def test_defaults(self, dispatch_settings: DispatchSettings) -> None:
        assert dispatch_settings.handler_lifetime_value is Lifetime.TRANSIENT
        assert dispatch_settings.dispatcher_lifetime_value is Lifetime.TRANSIENT
        assert dispatch_settings.log_level == "INFO"
        assert dispatch_settings.json_logs is True

    def test_lifetime_is_case_insensitive(self) -> None:
        settings = DispatchSettings(handler_lifetime="Scoped")
        assert settings.handler_lifetime_value is Lifetime.SCOPED

    def test_invalid_lifetime(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            DispatchSettings(handler_lifetime="forever")
        assert exc_info.value.setting_name == "handler_lifetime"
        assert "transient" in exc_info.value.allowed

    def test_invalid_log_level(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            DispatchSettings(log_level="LOUD")

    def test_invalid_value_is_config_error(self) -> None:
        assert issubclass(InvalidSettingValueError, ConfigError)


class TestEnvSettingsLoader:
    def test_loads_dispatch_settings(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("CQD_HANDLER_LIFETIME", "singleton")
        clean_env.setenv("CQD_JSON_LOGS", "no")
        settings = EnvSettingsLoader().load(DispatchSettings)
        assert settings.handler_lifetime_value is Lifetime.SINGLETON
        assert settings.json_logs is False

    def test_defaults_when_env_absent(self, clean_env: pytest.MonkeyPatch) -> None:
        assert EnvSettingsLoader().load(DispatchSettings) == DispatchSettings()

    def test_invalid_env_value_raises(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("CQD_DISPATCHER_LIFETIME", "eternal")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(DispatchSettings)

    def test_explicit_environ_mapping(self) -> None:
        loader = EnvSettingsLoader(
            {"WORKER_NAME": "w1", "WORKER_CONCURRENCY": "8", "WORKER_RATIO": "0.25",
             "WORKER_QUEUES": "high, low,"}
        )
        settings = loader.load(WorkerSettings)
        assert settings == WorkerSettings(name="w1", concurrency=8, ratio=0.25, queues=["high", "low"])

    def test_missing_required(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(WorkerSettings)
        assert exc_info.value.env_key == "WORKER_NAME"

    def test_unparseable_number(self) -> None:
        with pytest.raises(ConfigError, match="WORKER_CONCURRENCY"):
            EnvSettingsLoader({"WORKER_NAME": "w", "WORKER_CONCURRENCY": "many"}).load(
                WorkerSettings
            )


class TestDotenvSettingsLoader:
    def test_loads_from_file(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("CQD_HANDLER_LIFETIME=scoped\nCQD_LOG_LEVEL=DEBUG\n")
        settings = DotenvSettingsLoader(str(env_file)).load(DispatchSettings)
        assert settings.handler_lifetime_value is Lifetime.SCOPED
        assert settings.log_level == "DEBUG"
