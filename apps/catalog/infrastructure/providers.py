"""
Catalog view provider.
"""
from functools import lru_cache

from django.conf import settings
from django.utils.module_loading import import_string

from ..domain.repositories import CatalogView


@lru_cache(maxsize=1)
def get_catalog_view() -> CatalogView:
    """Process-wide catalog view built from STOREFRONT_CATALOG_VIEW."""
    return import_string(settings.STOREFRONT_CATALOG_VIEW)()


def ensure_loaded(catalog: CatalogView) -> CatalogView:
    """Load the catalog once if the host has not refreshed it yet."""
    if not getattr(catalog, 'is_loaded', True):
        catalog.refresh()
    return catalog
