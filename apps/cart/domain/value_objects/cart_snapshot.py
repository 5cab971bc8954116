"""
Cart snapshot value objects.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from shared.domain import ValueObject
from .money import Money


@dataclass(frozen=True)
class CartLineSnapshot(ValueObject):
    """One cart line frozen at a point in time."""
    product_id: str
    product_name: str
    unit_price: Money
    quantity: int
    image_url: Optional[str] = None

    @property
    def line_total(self) -> Money:
        return self.unit_price.multiply_by_quantity(self.quantity)


@dataclass(frozen=True)
class CartSnapshot(ValueObject):
    """Immutable copy of the cart, taken when an order is submitted."""
    lines: Tuple[CartLineSnapshot, ...]
    subtotal: Money
    total_items: int

    @property
    def is_empty(self) -> bool:
        return not self.lines
