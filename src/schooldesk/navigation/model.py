"""Navigation – NavItem, NavSection, NavigationCatalog value objects."""
from __future__ import annotations

import dataclasses
import enum
from typing import Any

from schooldesk.kernel.security.gate import Requirement


class Audience(str, enum.Enum):
    """The four disjoint navigation contexts."""

    STAFF = "staff"
    PARENT = "parent"
    STUDENT = "student"
    SUPER_ADMIN = "super-admin"

    def __str__(self) -> str:
        return self.value


class Icon(str, enum.Enum):
    """Symbolic icon reference; the presentation layer maps it to a glyph."""

    LAYOUT_DASHBOARD = "layout-dashboard"
    USERS = "users"
    GRADUATION_CAP = "graduation-cap"
    BOOK_OPEN = "book-open"
    CLIPBOARD_CHECK = "clipboard-check"
    FILE_TEXT = "file-text"
    CREDIT_CARD = "credit-card"
    CALENDAR = "calendar"
    USER_COG = "user-cog"
    MESSAGE_SQUARE = "message-square"
    ALERT_TRIANGLE = "alert-triangle"
    BAR_CHART = "bar-chart-3"
    SETTINGS = "settings"
    BUILDING = "building-2"
    SHIELD = "shield"
    SCROLL_TEXT = "scroll-text"

    def __str__(self) -> str:
        return self.value


@dataclasses.dataclass(frozen=True)
class NavItem:
    """One navigation entry, optionally with children.

    ``required_permission`` on a parent is informational: a parent is shown
    whenever at least one child is.
    """

    title: str
    destination: str
    icon: Icon
    required_permission: Requirement = None
    badge_count: int | None = None
    children: tuple["NavItem", ...] = ()

    def __post_init__(self) -> None:
        # Lists and sets are frozen to tuples so items stay hashable.
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))
        req = self.required_permission
        if req is not None and not isinstance(req, (str, tuple)):
            object.__setattr__(self, "required_permission", tuple(req))

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def walk(self):  # noqa: ANN201
        """Yield this item and every descendant, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "title": self.title,
            "destination": self.destination,
            "icon": self.icon.value,
        }
        if self.badge_count is not None:
            payload["badge_count"] = self.badge_count
        if self.children:
            payload["children"] = [child.to_dict() for child in self.children]
        return payload


@dataclasses.dataclass(frozen=True)
class NavSection:
    """Titled group of items, purely for presentation."""

    title: str
    items: tuple[NavItem, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "items": [item.to_dict() for item in self.items]}


@dataclasses.dataclass(frozen=True)
class NavigationCatalog:
    """Ordered sections for one audience.

    ``audience`` is ``None`` only for the empty catalog handed to callers
    that match no audience.
    """

    audience: Audience | None
    sections: tuple[NavSection, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.sections, tuple):
            object.__setattr__(self, "sections", tuple(self.sections))

    @classmethod
    def empty(cls, audience: Audience | None = None) -> "NavigationCatalog":
        return cls(audience=audience, sections=())

    @property
    def is_empty(self) -> bool:
        return not self.sections

    def items(self):  # noqa: ANN201
        """Yield every item in author order, children included."""
        for section in self.sections:
            for item in section.items:
                yield from item.walk()

    def to_dict(self) -> dict[str, Any]:
        return {
            "audience": self.audience.value if self.audience is not None else None,
            "sections": [section.to_dict() for section in self.sections],
        }


__all__ = ["Audience", "Icon", "NavItem", "NavSection", "NavigationCatalog"]
