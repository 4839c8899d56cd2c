"""Resilience – timeouts."""

from schooldesk.resilience.timeouts import TimeoutPolicy

__all__ = ["TimeoutPolicy"]
