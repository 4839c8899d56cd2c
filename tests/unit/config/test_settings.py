"""Unit tests for SchoolDeskSettings and EnvSettingsLoader."""

from __future__ import annotations

import dataclasses

import pytest

from schooldesk.config import (
    ConfigError,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    SchoolDeskSettings,
    Settings,
    load_settings,
)


@dataclasses.dataclass
class _RequiredSettings(Settings):
    _prefix = "SVC"

    api_key: str
    retries: int = 3
    debug: bool = False


class TestSchoolDeskSettingsDefaults:
    def test_defaults(self) -> None:
        settings = SchoolDeskSettings()
        assert settings.system_subdomain == "app"
        assert settings.development_hosts == ["localhost", "127.0.0.1", "::1"]
        assert settings.tenant_api_base_url == ""
        assert settings.tenant_resolution_timeout_seconds == 5.0
        assert settings.log_level == "INFO"

    def test_values_are_normalised(self) -> None:
        settings = SchoolDeskSettings(
            system_subdomain=" Admin ", development_hosts=["LOCALHOST", " ", "dev.local"]
        )
        assert settings.system_subdomain == "admin"
        assert settings.development_hosts == ["localhost", "dev.local"]

    def test_empty_subdomain_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            SchoolDeskSettings(system_subdomain="  ")
        assert exc_info.value.setting_name == "system_subdomain"

    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_non_positive_timeout_rejected(self, timeout: float) -> None:
        with pytest.raises(InvalidSettingValueError):
            SchoolDeskSettings(tenant_resolution_timeout_seconds=timeout)

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            SchoolDeskSettings(log_level="chatty")


class TestEnvSettingsLoader:
    def test_empty_environment_gives_defaults(self) -> None:
        assert EnvSettingsLoader({}).load(SchoolDeskSettings) == SchoolDeskSettings()

    def test_reads_prefixed_variables(self) -> None:
        settings = EnvSettingsLoader(
            {
                "SCHOOLDESK_SYSTEM_SUBDOMAIN": "console",
                "SCHOOLDESK_DEVELOPMENT_HOSTS": "localhost, dev.schooldesk.test",
                "SCHOOLDESK_TENANT_API_BASE_URL": "https://api.schooldesk.test",
                "SCHOOLDESK_TENANT_RESOLUTION_TIMEOUT_SECONDS": "2.5",
                "SCHOOLDESK_LOG_LEVEL": "debug",
            }
        ).load(SchoolDeskSettings)
        assert settings.system_subdomain == "console"
        assert settings.development_hosts == ["localhost", "dev.schooldesk.test"]
        assert settings.tenant_api_base_url == "https://api.schooldesk.test"
        assert settings.tenant_resolution_timeout_seconds == 2.5
        assert settings.log_level == "debug"

    def test_unparseable_number(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader(
                {"SCHOOLDESK_TENANT_RESOLUTION_TIMEOUT_SECONDS": "soon"}
            ).load(SchoolDeskSettings)
        assert exc_info.value.setting_name == "SCHOOLDESK_TENANT_RESOLUTION_TIMEOUT_SECONDS"

    def test_validation_error_propagates(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader(
                {"SCHOOLDESK_TENANT_RESOLUTION_TIMEOUT_SECONDS": "0"}
            ).load(SchoolDeskSettings)

    def test_missing_required(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(_RequiredSettings)
        assert exc_info.value.setting_name == "SVC_API_KEY"

    def test_coerces_int_and_bool(self) -> None:
        settings = EnvSettingsLoader(
            {"SVC_API_KEY": "k", "SVC_RETRIES": "5", "SVC_DEBUG": "yes"}
        ).load(_RequiredSettings)
        assert settings.retries == 5
        assert settings.debug is True

    def test_config_errors_are_application_errors(self) -> None:
        assert issubclass(MissingRequiredSettingError, ConfigError)

    def test_load_settings_uses_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCHOOLDESK_SYSTEM_SUBDOMAIN", "ops")
        assert load_settings().system_subdomain == "ops"
