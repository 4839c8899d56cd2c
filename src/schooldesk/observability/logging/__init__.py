"""Observability – structlog configuration and helpers."""
from schooldesk.observability.logging.factory import JsonLoggerFactory
from schooldesk.observability.logging.processors import TenantProcessor, get_logger

__all__ = ["JsonLoggerFactory", "TenantProcessor", "get_logger"]
