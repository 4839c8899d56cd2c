"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

from typing import Any

from schooldesk.kernel.errors import ExternalServiceError, TimeoutError as AppTimeoutError


def _require_httpx() -> Any:
    try:
        import httpx  # type: ignore[import-untyped]
        return httpx
    except ImportError as exc:
        raise ImportError("Install 'schooldesk[http]' to use the HTTPX adapter") from exc


class HttpxHttpClient:
    """Thin async httpx wrapper with structured error mapping.

    Propagates the active tenant slug as ``X-Tenant-Slug`` so backend logs can
    be correlated with the dashboard request.
    """

    def __init__(self, base_url: str = "", timeout: float = 10.0, **kwargs: Any) -> None:
        httpx = _require_httpx()
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, **kwargs)

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str, **kwargs: Any) -> Any:
        return await self._request("GET", url, **kwargs)

    def _tenant_headers(self) -> dict[str, str]:
        from schooldesk.tenancy.context import CurrentTenant

        slug = CurrentTenant.get().tenant.tenant_slug
        return {"X-Tenant-Slug": slug} if slug else {}

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        httpx = _require_httpx()
        headers = {**self._tenant_headers(), **(kwargs.pop("headers", None) or {})}
        try:
            response = await self._client.request(method, url, headers=headers, **kwargs)
            response.raise_for_status()
            return response
        except httpx.TimeoutException as exc:
            raise AppTimeoutError(f"HTTP request timed out: {method} {url}") from exc
        except httpx.HTTPStatusError as exc:
            raise ExternalServiceError(
                service=url,
                message=f"HTTP {exc.response.status_code} from {method} {url}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise ExternalServiceError(service=url, message=str(exc)) from exc


HttpClient = HttpxHttpClient

__all__ = ["HttpClient", "HttpxHttpClient"]
