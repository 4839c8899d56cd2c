"""Config settings – 12-factor env-based configuration."""
from schooldesk.config.settings.base import Settings
from schooldesk.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from schooldesk.config.settings.schooldesk import SchoolDeskSettings

__all__ = ["EnvSettingsLoader", "SchoolDeskSettings", "Settings", "SettingsLoader"]
