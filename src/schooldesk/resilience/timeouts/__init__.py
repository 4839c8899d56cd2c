"""Resilience – timeout policies."""
from schooldesk.resilience.timeouts.policy import TimeoutPolicy

__all__ = ["TimeoutPolicy"]
