"""Shared pytest configuration."""

pytest_plugins = ["schooldesk.testing.fixtures"]
