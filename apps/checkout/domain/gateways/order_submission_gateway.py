"""
Order submission gateway interface.
"""
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from apps.orders.domain.entities import Order
from ..value_objects.address import Address


class OrderSubmissionGateway(ABC):
    """Remote calls that turn a local cart into a backend order.

    Every method raises ``GatewayUnavailableError`` when the backend cannot be
    reached or answers with a non-2xx status.
    """

    @abstractmethod
    def add_to_remote_cart(
        self,
        product_ids: Sequence[str],
        quantities: Sequence[int],
        variable_ids: Sequence[str],
        existing_cart_id: Optional[str] = None,
        auth_token: Optional[str] = None,
    ) -> str:
        """Push the cart contents and return the backend cart id."""
        pass

    @abstractmethod
    def create_address(self, address: Address, auth_token: Optional[str] = None) -> str:
        """Persist a shipping address and return its id."""
        pass

    @abstractmethod
    def create_order(
        self,
        cart_id: str,
        address_id: str,
        payment_method: str,
        discount_id: Optional[str] = None,
        auth_token: Optional[str] = None,
    ) -> Order:
        """Create the order for a remote cart and address."""
        pass
