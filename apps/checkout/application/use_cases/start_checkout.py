"""
Start checkout use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from shared.domain.exceptions import GatewayUnavailableError
from apps.cart.domain.exceptions import EmptyCartError
from ...domain.entities import CheckoutSession
from ...domain.gateways import OrderSubmissionGateway
from ...domain.repositories import SessionStore, CART_ID_KEY, DISCOUNT_ID_KEY
from ..dtos.checkout_dto import StartCheckoutDTO

logger = logging.getLogger(__name__)

CART_SYNC_FAILED_MESSAGE = "Failed to add items to cart"


@dataclass
class StartCheckoutUseCase(UseCase[StartCheckoutDTO, CheckoutSession]):
    """Push the local cart to the backend and open a fresh checkout session."""

    gateway: OrderSubmissionGateway
    session_store: SessionStore

    def execute(self, input_dto: StartCheckoutDTO) -> UseCaseResult[CheckoutSession]:
        cart = input_dto.cart
        if cart.is_empty:
            raise EmptyCartError()

        existing_cart_id = self.session_store.get(CART_ID_KEY)
        try:
            cart_id = self.gateway.add_to_remote_cart(
                product_ids=[item.product_id for item in cart.items],
                quantities=[item.quantity for item in cart.items],
                variable_ids=["" for _ in cart.items],
                existing_cart_id=existing_cart_id,
                auth_token=self.session_store.auth_token,
            )
        except GatewayUnavailableError as e:
            logger.warning(f"Remote cart sync failed: {e.message}")
            return UseCaseResult.fail(CART_SYNC_FAILED_MESSAGE, e.code)

        self.session_store.set(CART_ID_KEY, cart_id)

        discount_id = input_dto.promotions.discount_id if input_dto.promotions else None
        if discount_id:
            self.session_store.set(DISCOUNT_ID_KEY, discount_id)
        else:
            self.session_store.remove(DISCOUNT_ID_KEY)

        logger.info(f"Checkout started for remote cart {cart_id} ({cart.total_item_count} items)")
        return UseCaseResult.ok(CheckoutSession.start(cart_id=cart_id))
