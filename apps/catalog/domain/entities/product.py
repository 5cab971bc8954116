"""
Product entity (read-only view of the commerce backend's catalog).
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..exceptions import InvalidProductError


@dataclass(frozen=True)
class CategoryRef:
    """Category reference embedded in a product record."""
    id: str
    name: str


@dataclass(frozen=True)
class Product:
    """Product as published by the catalog. Prices are in minor currency units."""
    id: str
    name: str
    base_price_minor: int
    discount_price_minor: int
    available_qty: int
    description: str = ""
    images: Tuple[str, ...] = field(default_factory=tuple)
    is_published: bool = True
    category: Optional[CategoryRef] = None

    def __post_init__(self):
        self._validate()

    def _validate(self) -> None:
        """Validate product data."""
        if not self.id:
            raise InvalidProductError("Product id is required")
        if self.base_price_minor < 0 or self.discount_price_minor < 0:
            raise InvalidProductError(f"Product '{self.id}' has a negative price")
        if self.discount_price_minor > self.base_price_minor:
            raise InvalidProductError(
                f"Product '{self.id}' discount price exceeds its base price"
            )
        if self.available_qty < 0:
            raise InvalidProductError(f"Product '{self.id}' has negative stock")

    @property
    def is_in_stock(self) -> bool:
        """Check if product is in stock."""
        return self.available_qty > 0

    @property
    def primary_image(self) -> Optional[str]:
        """First image URL, if the product has any."""
        return self.images[0] if self.images else None
