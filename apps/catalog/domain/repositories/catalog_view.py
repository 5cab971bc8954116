"""
Catalog view interface.
"""
from abc import ABC, abstractmethod
from typing import List

from ..entities.category import Category
from ..entities.product import Product


class CatalogView(ABC):
    """Read-only access to catalog data.

    Data freshness is the host's decision: implementations serve whatever the
    last ``refresh()`` loaded and never re-fetch on their own.
    """

    @abstractmethod
    def refresh(self) -> None:
        """Reload products and categories from the source of truth."""
        pass

    @abstractmethod
    def list_products(self) -> List[Product]:
        """List published products."""
        pass

    @abstractmethod
    def get_product(self, product_id: str) -> Product:
        """Get a published product by ID, or raise ProductNotFoundError."""
        pass

    @abstractmethod
    def list_categories(self) -> List[Category]:
        """List the category tree roots."""
        pass

    @abstractmethod
    def products_in_category(self, category_id: str) -> List[Product]:
        """List published products in a category."""
        pass
