"""
Checkout state machine.

    PersonalAddress --advance()--> Payment --submit()--> Submitted
    PersonalAddress <---back()---- Payment

``advance`` creates the shipping address remotely and ``submit`` creates the
order. Each transition only happens after its form validates and its remote
call succeeds; on any failure the shopper stays on the current phase with the
form data intact.

With a repository attached, the submitting flag is published before each
remote call and the stored checkout is re-read afterwards, so a second request
from the same browser is refused and an abandoned checkout stays abandoned.
"""
import logging
from typing import Optional

from shared.application import UseCaseResult
from shared.domain.exceptions import GatewayUnavailableError
from apps.cart.domain.entities import Cart
from apps.cart.domain.exceptions import EmptyCartError
from apps.cart.domain.value_objects import Money
from apps.orders.application import OrderConfirmation, SuccessProjection
from apps.orders.domain.events import OrderPlaced
from apps.promotions.domain.services import PromotionEngine
from ..entities.checkout_session import CheckoutSession
from ..exceptions import InvalidCheckoutStateError
from ..gateways.order_submission_gateway import OrderSubmissionGateway
from ..repositories.checkout_repository import CheckoutRepository
from ..repositories.session_store import (
    SessionStore,
    ADDRESS_ID_KEY,
    CART_ID_KEY,
    DISCOUNT_ID_KEY,
)
from ..validators import validate_address, validate_payment
from ..value_objects.checkout_phase import CheckoutPhase
from ..value_objects.field_updates import FieldUpdate

logger = logging.getLogger(__name__)

ADDRESS_FAILED_MESSAGE = "Failed to save address info"
PAYMENT_FAILED_MESSAGE = "Payment failed"
FIX_FIELDS_MESSAGE = "Please correct the highlighted fields"
IN_PROGRESS_MESSAGE = "A submission is already in progress"
ABANDONED_MESSAGE = "Checkout was abandoned"
NOT_STARTED_MESSAGE = "Checkout has not been started"

SUBMISSION_IN_PROGRESS = "SUBMISSION_IN_PROGRESS"
CHECKOUT_ABANDONED = "CHECKOUT_ABANDONED"
VALIDATION_ERROR = "VALIDATION_ERROR"
CHECKOUT_NOT_STARTED = "CHECKOUT_NOT_STARTED"


class CheckoutStateMachine:
    """Drives one CheckoutSession against the cart and the order gateway."""

    def __init__(
        self,
        session: CheckoutSession,
        cart: Cart,
        gateway: OrderSubmissionGateway,
        session_store: SessionStore,
        promotions: Optional[PromotionEngine] = None,
        projection: Optional[SuccessProjection] = None,
        repository: Optional[CheckoutRepository] = None,
    ):
        if cart.is_empty and not session.is_submitted:
            raise EmptyCartError()
        self.session = session
        self.cart = cart
        self.gateway = gateway
        self.session_store = session_store
        self.promotions = promotions
        self.projection = projection or SuccessProjection()
        self.repository = repository

    @property
    def phase(self) -> CheckoutPhase:
        return self.session.phase

    @property
    def field_errors(self):
        return dict(self.session.field_errors)

    @property
    def is_submitting(self) -> bool:
        return self.session.is_submitting

    def update(self, command: FieldUpdate) -> None:
        """Apply a single typed form edit."""
        self.session.apply_update(command)

    # ------------------------------------------
    # PersonalAddress -> Payment
    # ------------------------------------------

    def advance(self) -> UseCaseResult[CheckoutPhase]:
        session = self.session
        if session.phase != CheckoutPhase.PERSONAL_ADDRESS:
            raise InvalidCheckoutStateError("advance", session.phase.value)
        if session.is_submitting:
            return UseCaseResult.fail(IN_PROGRESS_MESSAGE, SUBMISSION_IN_PROGRESS)

        errors = validate_address(session.address)
        session.replace_errors(errors)
        if errors:
            return UseCaseResult.fail(FIX_FIELDS_MESSAGE, VALIDATION_ERROR)

        if session.address_is_confirmed:
            logger.info(f"Reusing address {session.address_id} for unchanged shipping details")
            session.move_to(CheckoutPhase.PAYMENT)
            return UseCaseResult.ok(session.phase)

        self._begin_submitting()
        try:
            address_id = self.gateway.create_address(
                session.address.to_address(),
                auth_token=self.session_store.auth_token,
            )
        except GatewayUnavailableError as e:
            logger.warning(f"Address creation failed: {e.message}")
            return self._gateway_failure(ADDRESS_FAILED_MESSAGE, e)
        finally:
            session.end_submitting()

        if self._was_abandoned():
            logger.info(f"Ignoring address {address_id} created for an abandoned checkout")
            return UseCaseResult.fail(ABANDONED_MESSAGE, CHECKOUT_ABANDONED)

        session.record_address(address_id)
        self.session_store.set(ADDRESS_ID_KEY, address_id)
        session.move_to(CheckoutPhase.PAYMENT)
        logger.info(f"Checkout advanced to payment with address {address_id}")
        return UseCaseResult.ok(session.phase)

    # ------------------------------------------
    # Payment -> PersonalAddress
    # ------------------------------------------

    def back(self) -> CheckoutPhase:
        """Return to the address form; no validation and no network call."""
        session = self.session
        if session.phase == CheckoutPhase.SUBMITTED:
            raise InvalidCheckoutStateError("go back from", session.phase.value)
        if session.phase == CheckoutPhase.PAYMENT:
            session.move_to(CheckoutPhase.PERSONAL_ADDRESS)
        return session.phase

    # ------------------------------------------
    # Payment -> Submitted
    # ------------------------------------------

    def submit(self) -> UseCaseResult[OrderConfirmation]:
        session = self.session
        if session.phase != CheckoutPhase.PAYMENT:
            raise InvalidCheckoutStateError("submit", session.phase.value)
        if session.is_submitting:
            return UseCaseResult.fail(IN_PROGRESS_MESSAGE, SUBMISSION_IN_PROGRESS)

        errors = validate_payment(session.payment)
        session.replace_errors(errors)
        if errors:
            return UseCaseResult.fail(FIX_FIELDS_MESSAGE, VALIDATION_ERROR)

        cart_id = session.cart_id or self.session_store.get(CART_ID_KEY)
        address_id = session.address_id or self.session_store.get(ADDRESS_ID_KEY)
        if not cart_id or not address_id:
            session.banner_error = NOT_STARTED_MESSAGE
            return UseCaseResult.fail(NOT_STARTED_MESSAGE, CHECKOUT_NOT_STARTED)

        snapshot = self.cart.snapshot()
        discount = self._discount_for(snapshot.subtotal)
        discount_id = self._discount_id()

        self._begin_submitting()
        try:
            order = self.gateway.create_order(
                cart_id=cart_id,
                address_id=address_id,
                payment_method=session.payment.payment_method,
                discount_id=discount_id,
                auth_token=self.session_store.auth_token,
            )
        except GatewayUnavailableError as e:
            logger.warning(f"Order creation failed for cart {cart_id}: {e.message}")
            return self._gateway_failure(PAYMENT_FAILED_MESSAGE, e)
        finally:
            session.end_submitting()

        if self._was_abandoned():
            logger.info(f"Ignoring order {order.order_id} returned for an abandoned checkout")
            return UseCaseResult.fail(ABANDONED_MESSAGE, CHECKOUT_ABANDONED)

        session.move_to(CheckoutPhase.SUBMITTED)
        self.cart.clear()
        if self.promotions is not None:
            self.promotions.remove()
        for key in (CART_ID_KEY, ADDRESS_ID_KEY, DISCOUNT_ID_KEY):
            self.session_store.remove(key)
        session.forget_remote_ids()

        confirmation = self.projection.project(snapshot, order, discount)
        session.add_domain_event(
            OrderPlaced(
                order_id=order.order_id,
                cart_id=cart_id,
                address_id=address_id,
                payment_method=order.payment_method,
                total_minor=confirmation.total.amount_minor,
            )
        )
        logger.info(f"Order {order.order_id} created for cart {cart_id}")
        return UseCaseResult.ok(confirmation)

    def abandon(self) -> None:
        """The shopper navigated away; any result still in flight is dropped."""
        self.session.abandon()

    # ------------------------------------------
    # Private helpers
    # ------------------------------------------

    def _begin_submitting(self) -> None:
        self.session.begin_submitting()
        if self.repository is not None:
            self.repository.publish(self.session)

    def _was_abandoned(self) -> bool:
        """True when the shopper left, or replaced, this checkout while a call was pending."""
        if self.session.is_abandoned:
            return True
        if self.repository is None:
            return False
        stored = self.repository.reload()
        return stored is None or stored.id != self.session.id

    def _discount_for(self, subtotal: Money) -> Money:
        if self.promotions is None:
            return Money.zero(subtotal.currency)
        return Money(
            amount_minor=self.promotions.discount_minor(subtotal.amount_minor),
            currency=subtotal.currency,
        )

    def _discount_id(self) -> Optional[str]:
        if self.promotions is not None and self.promotions.discount_id:
            return self.promotions.discount_id
        return self.session_store.get(DISCOUNT_ID_KEY)

    def _gateway_failure(self, message: str, error: GatewayUnavailableError) -> UseCaseResult:
        if self._was_abandoned():
            return UseCaseResult.fail(ABANDONED_MESSAGE, CHECKOUT_ABANDONED)
        self.session.banner_error = message
        return UseCaseResult.fail(message, error.code)
