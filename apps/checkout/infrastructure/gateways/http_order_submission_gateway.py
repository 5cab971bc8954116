"""
OrderSubmissionGateway backed by the commerce backend's order endpoints.
"""
import logging
from typing import Optional, Sequence

from django.conf import settings

from shared.domain.exceptions import GatewayUnavailableError
from shared.infrastructure.http import CommerceApiClient
from apps.orders.domain.entities import Order
from apps.orders.infrastructure.order_mapper import order_from_payload
from ...domain.gateways import OrderSubmissionGateway
from ...domain.value_objects import Address

logger = logging.getLogger(__name__)

CART_ADD_PATH = '/order/cart/add'
ADD_ADDRESS_PATH = '/order/add_address'
CREATE_ORDER_PATH = '/order/create'


class HttpOrderSubmissionGateway(OrderSubmissionGateway):
    """Posts cart, address and order requests as JSON.

    The bearer token travels both in the ``token`` body field, which the
    backend reads, and in the Authorization header.
    """

    def __init__(self, client: Optional[CommerceApiClient] = None, currency: Optional[str] = None):
        self.client = client or CommerceApiClient()
        self.currency = currency or settings.STOREFRONT_CURRENCY

    @staticmethod
    def _with_token(body: dict, auth_token: Optional[str]) -> dict:
        if auth_token:
            body['token'] = auth_token
        return body

    def add_to_remote_cart(
        self,
        product_ids: Sequence[str],
        quantities: Sequence[int],
        variable_ids: Sequence[str],
        existing_cart_id: Optional[str] = None,
        auth_token: Optional[str] = None,
    ) -> str:
        body = {
            'product_id': list(product_ids),
            'qty': list(quantities),
            'variable_id': list(variable_ids),
        }
        if existing_cart_id:
            body['cart_id'] = existing_cart_id
        data = self.client.post_json(CART_ADD_PATH, self._with_token(body, auth_token), token=auth_token)

        cart_id = data.get('cart_id') if isinstance(data, dict) else None
        cart_id = cart_id or existing_cart_id
        if not cart_id:
            raise GatewayUnavailableError(operation=CART_ADD_PATH, detail="response has no cart_id")
        logger.info(f"Remote cart {cart_id} holds {len(product_ids)} products")
        return str(cart_id)

    def create_address(self, address: Address, auth_token: Optional[str] = None) -> str:
        body = {
            'recipient_name': address.recipient_name,
            'street': address.street,
            'city': address.city,
            'state': address.state,
            'phone': address.phone,
            'is_default': address.is_default,
        }
        data = self.client.post_json(ADD_ADDRESS_PATH, self._with_token(body, auth_token), token=auth_token)

        address_id = (data.get('_id') or data.get('address_id')) if isinstance(data, dict) else None
        if not address_id:
            raise GatewayUnavailableError(operation=ADD_ADDRESS_PATH, detail="response has no address id")
        logger.info(f"Created address {address_id}")
        return str(address_id)

    def create_order(
        self,
        cart_id: str,
        address_id: str,
        payment_method: str,
        discount_id: Optional[str] = None,
        auth_token: Optional[str] = None,
    ) -> Order:
        body = {
            'cart_id': cart_id,
            'address_id': address_id,
            'payment_method': payment_method,
        }
        if discount_id:
            body['discount_id'] = discount_id
        data = self.client.post_json(CREATE_ORDER_PATH, self._with_token(body, auth_token), token=auth_token)

        if not isinstance(data, dict):
            data = {}
        payload = data.get('order') if isinstance(data.get('order'), dict) else data
        try:
            order = order_from_payload(payload, payment_method=payment_method, currency=self.currency)
        except (ValueError, TypeError, KeyError) as e:
            logger.error(f"Unreadable order payload for cart {cart_id}: {e}")
            raise GatewayUnavailableError(operation=CREATE_ORDER_PATH, detail="malformed order response") from e
        logger.info(f"Created order {order.order_id or '<unnumbered>'} for cart {cart_id}")
        return order
