"""Navigation – NavigationResolver.

Turns a static :class:`NavigationCatalog` plus an :class:`AccessModel` into
the subset the caller may see. All operations are pure: they build new
frozen structures and never touch the source catalog.

Visibility rule, bottom-up:

* a leaf is visible iff its requirement passes (no requirement ⇒ visible);
* a parent is visible iff at least one child is visible. The parent's own
  requirement is not consulted.

Sections left without visible items are dropped; order is preserved.
"""
from __future__ import annotations

import dataclasses
from typing import Mapping

from schooldesk.kernel.security.access import AccessModel
from schooldesk.kernel.security.gate import check_requirement
from schooldesk.navigation.audience import classify_audience
from schooldesk.navigation.catalogs import DEFAULT_CATALOGS
from schooldesk.navigation.model import Audience, NavigationCatalog, NavItem, NavSection
from schooldesk.observability.logging import get_logger

logger = get_logger(__name__)


def filter_item(item: NavItem, access: AccessModel) -> NavItem | None:
    """Return *item* pruned to its visible subtree, or ``None`` if hidden."""
    if item.is_leaf:
        return item if check_requirement(access, item.required_permission) else None
    children = tuple(
        child
        for child in (filter_item(c, access) for c in item.children)
        if child is not None
    )
    if not children:
        return None
    if children == item.children:
        return item
    return dataclasses.replace(item, children=children)


def is_item_visible(item: NavItem, access: AccessModel) -> bool:
    return filter_item(item, access) is not None


def filter_catalog(catalog: NavigationCatalog, access: AccessModel) -> NavigationCatalog:
    sections: list[NavSection] = []
    for section in catalog.sections:
        items = tuple(
            visible
            for visible in (filter_item(item, access) for item in section.items)
            if visible is not None
        )
        if items:
            sections.append(NavSection(section.title, items))
    return NavigationCatalog(audience=catalog.audience, sections=tuple(sections))


def apply_badges(catalog: NavigationCatalog, counts: Mapping[str, int]) -> NavigationCatalog:
    """Return a copy of *catalog* with ``badge_count`` set by destination.

    Badge counts (unread messages and the like) change independently of
    visibility, so they are overlaid after filtering.
    """
    if not counts:
        return catalog

    def _badge(item: NavItem) -> NavItem:
        children = tuple(_badge(child) for child in item.children)
        badge = counts.get(item.destination, item.badge_count)
        return dataclasses.replace(item, badge_count=badge, children=children)

    return NavigationCatalog(
        audience=catalog.audience,
        sections=tuple(
            NavSection(section.title, tuple(_badge(item) for item in section.items))
            for section in catalog.sections
        ),
    )


def _matches(destination: str, path: str) -> bool:
    return path == destination or path.startswith(f"{destination.rstrip('/')}/")


def find_active(catalog: NavigationCatalog, path: str) -> NavItem | None:
    """Return the most specific item for *path*.

    An item matches when *path* equals its destination or sits underneath it;
    the longest matching destination wins.
    """
    if len(path) > 1:
        path = path.rstrip("/")
    best: NavItem | None = None
    for item in catalog.items():
        if _matches(item.destination, path):
            if best is None or len(item.destination) > len(best.destination):
                best = item
    return best


class NavigationResolver:
    """Selects the caller's catalog and filters it.

    Catalogs are injected so tests (and tenants with custom menus) can
    supply their own; :func:`default_resolver` wires the static ones.

    Example::

        resolver = default_resolver()
        visible = resolver.resolve(AccessModel.from_user(user))
        payload = visible.to_dict()
    """

    def __init__(self, catalogs: Mapping[Audience, NavigationCatalog]) -> None:
        self._catalogs = dict(catalogs)

    def catalog_for(self, audience: Audience | None) -> NavigationCatalog:
        if audience is None:
            return NavigationCatalog.empty()
        return self._catalogs.get(audience, NavigationCatalog.empty(audience))

    def filter(self, catalog: NavigationCatalog, access: AccessModel) -> NavigationCatalog:
        return filter_catalog(catalog, access)

    def resolve(
        self,
        access: AccessModel,
        badges: Mapping[str, int] | None = None,
    ) -> NavigationCatalog:
        """Classify *access*, pick its catalog and return the visible part."""
        audience = classify_audience(access)
        visible = filter_catalog(self.catalog_for(audience), access)
        if badges:
            visible = apply_badges(visible, badges)
        logger.debug(
            "navigation.resolved",
            audience=str(audience) if audience is not None else None,
            role=str(access.role),
            sections=len(visible.sections),
            items=sum(1 for _ in visible.items()),
        )
        return visible


def default_resolver() -> NavigationResolver:
    return NavigationResolver(DEFAULT_CATALOGS)


__all__ = [
    "NavigationResolver",
    "apply_badges",
    "default_resolver",
    "filter_catalog",
    "filter_item",
    "find_active",
    "is_item_visible",
]
