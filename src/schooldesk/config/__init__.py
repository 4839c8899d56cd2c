"""Config – env-based settings and validation errors."""

from schooldesk.config.settings import (
    EnvSettingsLoader,
    SchoolDeskSettings,
    Settings,
    SettingsLoader,
)
from schooldesk.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


def load_settings() -> SchoolDeskSettings:
    """Load :class:`SchoolDeskSettings` from the process environment."""
    return EnvSettingsLoader().load(SchoolDeskSettings)


__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SchoolDeskSettings",
    "Settings",
    "SettingsLoader",
    "load_settings",
]
