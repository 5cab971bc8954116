"""
CatalogView backed by the commerce backend's product endpoints.
"""
import logging
from typing import Dict, List, Optional

from shared.infrastructure.http import CommerceApiClient
from ..domain.entities import Category, CategoryRef, Product
from ..domain.exceptions import CategoryNotFoundError, ProductNotFoundError
from ..domain.repositories import CatalogView

logger = logging.getLogger(__name__)

PRODUCTS_PATH = '/product/all_products'
CATEGORIES_PATH = '/product/category/full'


def product_from_payload(data: dict) -> Product:
    """Map a backend product record onto a Product."""
    category = data.get('category')
    return Product(
        id=str(data['_id']),
        name=data.get('name', ''),
        description=data.get('description') or '',
        base_price_minor=int(data.get('base_price', 0)),
        discount_price_minor=int(data.get('discount_price', data.get('base_price', 0))),
        available_qty=int(data.get('qty', 0)),
        images=tuple(data.get('images') or ()),
        is_published=bool(data.get('is_published', False)),
        category=CategoryRef(id=str(category['_id']), name=category.get('name', ''))
        if category else None,
    )


def category_from_payload(data: dict) -> Category:
    """Map a backend category record (with nested childs) onto a Category."""
    parent_id = data.get('parent_id')
    return Category(
        id=str(data['_id']),
        name=data.get('name', ''),
        parent_id=str(parent_id) if parent_id else None,
        children=tuple(category_from_payload(child) for child in data.get('childs') or ()),
    )


class HttpCatalogView(CatalogView):
    """Caches the published catalog between explicit refreshes."""

    def __init__(self, client: Optional[CommerceApiClient] = None):
        self.client = client or CommerceApiClient()
        self._products: Dict[str, Product] = {}
        self._categories: List[Category] = []
        self.is_loaded = False

    def refresh(self) -> None:
        products = self.client.get_json(PRODUCTS_PATH)
        categories = self.client.get_json(CATEGORIES_PATH)

        published = [product_from_payload(item) for item in products or []]
        self._products = {
            product.id: product for product in published if product.is_published
        }
        self._categories = [category_from_payload(item) for item in categories or []]
        self.is_loaded = True
        logger.info(
            f"Catalog refreshed: {len(self._products)} published products, "
            f"{len(self._categories)} root categories"
        )

    def list_products(self) -> List[Product]:
        return list(self._products.values())

    def get_product(self, product_id: str) -> Product:
        try:
            return self._products[product_id]
        except KeyError:
            raise ProductNotFoundError(product_id)

    def list_categories(self) -> List[Category]:
        return list(self._categories)

    def products_in_category(self, category_id: str) -> List[Product]:
        category = self._find_category(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)
        category_ids = {node.id for node in category.walk()}
        return [
            product for product in self._products.values()
            if product.category and product.category.id in category_ids
        ]

    def _find_category(self, category_id: str) -> Optional[Category]:
        for root in self._categories:
            for node in root.walk():
                if node.id == category_id:
                    return node
        return None
