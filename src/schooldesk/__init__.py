"""
schooldesk – access and navigation core for a multi-tenant school dashboard.

Import path convention::

    from schooldesk.kernel.security import AccessModel, PERMISSIONS
    from schooldesk.navigation import NavigationResolver, default_resolver
    from schooldesk.tenancy import TenantResolver, MockTenantDirectory
    from schooldesk.adapters.fastapi import NavigationRouter
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
