"""
Cart item entity.
"""
from dataclasses import dataclass
from typing import Optional

from shared.domain import BaseEntity
from ..value_objects.money import Money, DEFAULT_CURRENCY


@dataclass
class CartItem(BaseEntity):
    """Cart line holding a snapshot of the product taken at add time."""
    product_id: str = ""
    product_name: str = ""
    unit_price_minor: int = 0
    base_price_minor: int = 0
    quantity: int = 1
    description: str = ""
    image_url: Optional[str] = None
    currency: str = DEFAULT_CURRENCY

    @property
    def unit_price(self) -> Money:
        return Money(amount_minor=self.unit_price_minor, currency=self.currency)

    @property
    def subtotal(self) -> Money:
        """Calculate the item subtotal."""
        return self.unit_price.multiply_by_quantity(self.quantity)

    @property
    def savings(self) -> Money:
        """Difference between base and discounted price for this line."""
        per_unit = Money(amount_minor=self.base_price_minor - self.unit_price_minor, currency=self.currency)
        return per_unit.multiply_by_quantity(self.quantity)
