"""Observability – structured logging."""

from schooldesk.observability.logging import JsonLoggerFactory, TenantProcessor, get_logger

__all__ = ["JsonLoggerFactory", "TenantProcessor", "get_logger"]
