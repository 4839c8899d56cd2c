"""Testing support – pytest fixtures and Hypothesis strategies.

Import in your ``conftest.py``::

    pytest_plugins = ["schooldesk.testing.fixtures"]
"""

from schooldesk.testing.strategies import (
    access_model_strategy,
    catalog_strategy,
    nav_item_strategy,
    permission_strategy,
    requirement_strategy,
)

__all__ = [
    "access_model_strategy",
    "catalog_strategy",
    "nav_item_strategy",
    "permission_strategy",
    "requirement_strategy",
]
