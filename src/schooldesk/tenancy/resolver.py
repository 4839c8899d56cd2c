"""Tenancy – host parsing and TenantResolver.

The leading label of the request host decides the mode:

* the reserved system label (``app`` by default) or a development host
  (``localhost``, loopback addresses) → super-admin mode, no lookup;
* anything else → the label is a tenant slug looked up in a
  :class:`~schooldesk.tenancy.directory.TenantDirectory`.

A lookup is bounded by ``tenant_resolution_timeout_seconds``. Any failure
degrades to :meth:`TenantState.fallback`; nothing is retried.
"""
from __future__ import annotations

import dataclasses
import ipaddress
from typing import Literal

from schooldesk.config.settings import SchoolDeskSettings
from schooldesk.kernel.errors import TenantResolutionError
from schooldesk.observability.logging import get_logger
from schooldesk.resilience.timeouts import TimeoutPolicy
from schooldesk.tenancy.context import TenantContext, TenantState
from schooldesk.tenancy.directory import TenantDirectory

logger = get_logger(__name__)

HostMode = Literal["super-admin", "tenant", "unresolved"]


@dataclasses.dataclass(frozen=True)
class HostResolution:
    hostname: str
    mode: HostMode
    slug: str | None = None

    @property
    def is_super_admin(self) -> bool:
        return self.mode == "super-admin"


def _strip_port(host: str) -> str:
    host = host.strip().lower().rstrip(".")
    if host.startswith("["):
        # [::1]:8000
        return host[1:].split("]", 1)[0]
    if host.count(":") == 1:
        return host.split(":", 1)[0]
    return host


def _is_ip_literal(hostname: str) -> bool:
    try:
        ipaddress.ip_address(hostname)
    except ValueError:
        return False
    return True


def parse_host(host: str, settings: SchoolDeskSettings | None = None) -> HostResolution:
    """Classify a ``Host`` header value (port allowed)."""
    settings = settings or SchoolDeskSettings()
    hostname = _strip_port(host)
    if not hostname:
        return HostResolution(hostname, "unresolved")
    if hostname in settings.development_hosts:
        return HostResolution(hostname, "super-admin")
    if _is_ip_literal(hostname):
        if ipaddress.ip_address(hostname).is_loopback:
            return HostResolution(hostname, "super-admin")
        return HostResolution(hostname, "unresolved")

    subdomain = hostname.split(".", 1)[0]
    if subdomain == settings.system_subdomain:
        return HostResolution(hostname, "super-admin")
    if not subdomain or "." not in hostname:
        # Single-label host, or an empty leading label (".example.com").
        return HostResolution(hostname, "unresolved")
    return HostResolution(hostname, "tenant", slug=subdomain)


class TenantResolver:
    """Resolves a request host to a :class:`TenantState`.

    Successful lookups are cached per slug for the lifetime of the resolver;
    failures are not cached so the next request tries again.

    Example::

        resolver = TenantResolver(MockTenantDirectory())
        state = await resolver.resolve("greenfield.schooldesk.io")
        state.tenant.school_name   # "Greenfield International School"
    """

    def __init__(
        self,
        directory: TenantDirectory,
        settings: SchoolDeskSettings | None = None,
    ) -> None:
        self._directory = directory
        self._settings = settings or SchoolDeskSettings()
        self._timeout = TimeoutPolicy(self._settings.tenant_resolution_timeout_seconds)
        self._cache: dict[str, TenantContext] = {}

    @property
    def settings(self) -> SchoolDeskSettings:
        return self._settings

    def parse(self, host: str) -> HostResolution:
        return parse_host(host, self._settings)

    async def resolve(self, host: str) -> TenantState:
        resolution = self.parse(host)
        if resolution.is_super_admin:
            return TenantState.super_admin()
        if resolution.slug is None:
            logger.warning("tenant.host_unresolved", host=resolution.hostname)
            return TenantState.fallback()

        slug = resolution.slug
        cached = self._cache.get(slug)
        if cached is not None:
            return TenantState.resolved(cached)

        try:
            tenant = await self._timeout.execute(lambda: self._directory.lookup(slug))
        except Exception as exc:  # noqa: BLE001 – degrade to the default tenant
            error = TenantResolutionError(slug, cause=exc)
            logger.warning(
                "tenant.resolution_failed",
                slug=slug,
                code=error.code,
                error=repr(exc),
            )
            return TenantState.fallback()

        self._cache[slug] = tenant
        logger.info("tenant.resolved", slug=slug, tenant_id=tenant.tenant_id)
        return TenantState.resolved(tenant)

    def forget(self, slug: str | None = None) -> None:
        """Drop one cached tenant, or all of them."""
        if slug is None:
            self._cache.clear()
        else:
            self._cache.pop(slug, None)


__all__ = ["HostMode", "HostResolution", "TenantResolver", "parse_host"]
