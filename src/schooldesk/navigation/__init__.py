"""Navigation – catalogs, audience classification and the resolver."""
from schooldesk.navigation.model import Audience, Icon, NavigationCatalog, NavItem, NavSection
from schooldesk.navigation.catalogs import (
    DEFAULT_CATALOGS,
    PARENT_NAVIGATION,
    STAFF_NAVIGATION,
    STUDENT_NAVIGATION,
    SUPER_ADMIN_NAVIGATION,
)
from schooldesk.navigation.audience import classify_audience
from schooldesk.navigation.resolver import (
    NavigationResolver,
    apply_badges,
    default_resolver,
    filter_catalog,
    filter_item,
    find_active,
    is_item_visible,
)

__all__ = [
    "Audience",
    "DEFAULT_CATALOGS",
    "Icon",
    "NavItem",
    "NavSection",
    "NavigationCatalog",
    "NavigationResolver",
    "PARENT_NAVIGATION",
    "STAFF_NAVIGATION",
    "STUDENT_NAVIGATION",
    "SUPER_ADMIN_NAVIGATION",
    "apply_badges",
    "classify_audience",
    "default_resolver",
    "filter_catalog",
    "filter_item",
    "find_active",
    "is_item_visible",
]
