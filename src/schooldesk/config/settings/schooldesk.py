"""Config settings – SchoolDeskSettings."""
from __future__ import annotations

import dataclasses
import logging

from schooldesk.config.settings.base import Settings
from schooldesk.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class SchoolDeskSettings(Settings):
    """Runtime settings, read from ``SCHOOLDESK_*`` environment variables.

    ``tenant_api_base_url`` left empty selects the offline mock directory.
    """

    _prefix = "SCHOOLDESK"

    system_subdomain: str = "app"
    development_hosts: list[str] = dataclasses.field(
        default_factory=lambda: ["localhost", "127.0.0.1", "::1"]
    )
    tenant_api_base_url: str = ""
    tenant_resolution_timeout_seconds: float = 5.0
    log_level: str = "INFO"

    def _validate(self) -> None:
        self.system_subdomain = self.system_subdomain.strip().lower()
        self.development_hosts = [h.strip().lower() for h in self.development_hosts if h.strip()]
        if not self.system_subdomain:
            raise InvalidSettingValueError(
                "system_subdomain", self.system_subdomain, "must not be empty"
            )
        if self.tenant_resolution_timeout_seconds <= 0:
            raise InvalidSettingValueError(
                "tenant_resolution_timeout_seconds",
                self.tenant_resolution_timeout_seconds,
                "must be positive",
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown level")


__all__ = ["SchoolDeskSettings"]
