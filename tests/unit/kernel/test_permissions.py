"""Unit tests for the static permission registry."""

from __future__ import annotations

import pytest

from schooldesk.kernel.security import (
    CAPABILITIES,
    PERMISSION_GROUPS,
    PERMISSION_META,
    PERMISSIONS,
    describe_permission,
    is_registered,
)


class TestRegistry:
    def test_tokens_follow_module_action_convention(self) -> None:
        for token in PERMISSIONS.all():
            module, _, action = token.partition(".")
            assert module and action, token

    def test_all_contains_every_constant(self) -> None:
        assert PERMISSIONS.PORTAL_GUARDIAN in PERMISSIONS.all()
        assert PERMISSIONS.APP_MANAGE in PERMISSIONS.all()
        assert len(PERMISSIONS.all()) == 12

    def test_is_registered(self) -> None:
        assert is_registered("finance.view") is True
        assert is_registered("finance.delete") is False


class TestMetadata:
    def test_every_grouped_token_has_meta(self) -> None:
        for group in PERMISSION_GROUPS:
            for token in group.permissions:
                assert token in PERMISSION_META

    def test_group_order(self) -> None:
        assert [g.name for g in PERMISSION_GROUPS] == [
            "Portals",
            "Academic",
            "Finance",
            "Identity & System",
        ]

    def test_describe_registered(self) -> None:
        meta = describe_permission(PERMISSIONS.FINANCE_MANAGE)
        assert meta.label == "Manage Finance"

    def test_describe_unregistered_falls_back_to_token(self) -> None:
        meta = describe_permission("library.borrow")
        assert meta.label == "library.borrow"
        assert meta.description == ""

    def test_meta_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            PERMISSION_META["x.y"] = describe_permission("x.y")  # type: ignore[index]


class TestCapabilities:
    def test_every_capability_references_registered_tokens(self) -> None:
        for requirement in CAPABILITIES.values():
            tokens = (requirement,) if isinstance(requirement, str) else requirement
            for token in tokens:
                assert is_registered(token), token
