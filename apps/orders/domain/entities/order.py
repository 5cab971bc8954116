"""
Order entity.

The backend owns orders; the storefront keeps this read-only copy of what
``create_order`` returned.
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Tuple

from apps.cart.domain.value_objects import Money
from ..value_objects.order_status import OrderStatus


@dataclass(frozen=True)
class OrderLine:
    """A purchased line as recorded by the backend."""
    product_id: str
    product_name: str
    quantity: int
    unit_price: Money
    line_total: Money


@dataclass(frozen=True)
class Order:
    """Order as returned by the commerce backend."""
    order_id: str
    payment_method: str
    status: OrderStatus = OrderStatus.PENDING
    line_items: Tuple[OrderLine, ...] = field(default_factory=tuple)
    subtotal: Optional[Money] = None
    discount: Optional[Money] = None
    total: Optional[Money] = None
    order_number: Optional[str] = None
    placed_at: Optional[datetime] = None
    estimated_delivery: Optional[date] = None

    @property
    def item_count(self) -> int:
        """Get the total number of items."""
        return sum(line.quantity for line in self.line_items)
