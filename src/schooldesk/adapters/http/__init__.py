"""HTTP adapter – async HTTP client and the HTTP tenant directory."""
from schooldesk.adapters.http.client import HttpClient, HttpxHttpClient
from schooldesk.adapters.http.tenant_directory import HttpTenantDirectory

__all__ = ["HttpClient", "HttpTenantDirectory", "HttpxHttpClient"]
