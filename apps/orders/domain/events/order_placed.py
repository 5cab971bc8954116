"""
Order placed domain event.
"""
from dataclasses import dataclass

from shared.domain import DomainEvent


@dataclass(frozen=True)
class OrderPlaced(DomainEvent):
    """Event raised when the backend accepts an order from the storefront."""
    order_id: str = ""
    cart_id: str = ""
    address_id: str = ""
    payment_method: str = ""
    total_minor: int = 0
