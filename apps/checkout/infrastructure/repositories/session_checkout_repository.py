"""
Django session implementation of CheckoutRepository.
"""
import logging
from importlib import import_module
from typing import MutableMapping, Optional
from uuid import UUID

from django.conf import settings
from django.contrib.sessions.backends.base import SessionBase

from ...domain.entities import CheckoutSession
from ...domain.repositories import CheckoutRepository
from ...domain.value_objects import AddressDraft, CheckoutPhase, PaymentDraft

logger = logging.getLogger(__name__)

CHECKOUT_SESSION_KEY = 'checkout'


class SessionCheckoutRepository(CheckoutRepository):
    """Stores the checkout drafts, phase and ids as plain JSON-safe data.

    With a Django session, ``publish`` writes through to the session store
    immediately and ``reload`` re-reads it, so concurrent requests from the
    same browser see the submitting flag and an abandoned checkout.
    """

    def __init__(self, session: MutableMapping):
        self.session = session

    def load(self) -> Optional[CheckoutSession]:
        data = self.session.get(CHECKOUT_SESSION_KEY)
        if not data:
            return None
        return self._to_entity(data)

    def save(self, checkout: CheckoutSession) -> CheckoutSession:
        self.session[CHECKOUT_SESSION_KEY] = self._to_data(checkout)
        return checkout

    def delete(self) -> None:
        self.session.pop(CHECKOUT_SESSION_KEY, None)

    def publish(self, checkout: CheckoutSession) -> CheckoutSession:
        self.save(checkout)
        if isinstance(self.session, SessionBase):
            self.session.save()
        return checkout

    def reload(self) -> Optional[CheckoutSession]:
        if isinstance(self.session, SessionBase) and self.session.session_key:
            engine = import_module(settings.SESSION_ENGINE)
            stored = engine.SessionStore(session_key=self.session.session_key)
            latest = dict(stored.items())
            # take over the stored state so the response does not write back a stale copy
            self.session.clear()
            self.session.update(latest)
            logger.debug(f"Reloaded session {self.session.session_key} from the session store")
        return self.load()

    @staticmethod
    def _to_entity(data: dict) -> CheckoutSession:
        confirmed = data.get('confirmed_address')
        checkout = CheckoutSession(
            phase=CheckoutPhase(data.get('phase', CheckoutPhase.PERSONAL_ADDRESS.value)),
            address=AddressDraft(**data.get('address', {})),
            payment=PaymentDraft(**data.get('payment', {})),
            field_errors=dict(data.get('field_errors', {})),
            banner_error=data.get('banner_error'),
            cart_id=data.get('cart_id'),
            address_id=data.get('address_id'),
            confirmed_address=AddressDraft(**confirmed) if confirmed else None,
            is_submitting=bool(data.get('is_submitting', False)),
        )
        if data.get('id'):
            checkout.id = UUID(data['id'])
        return checkout

    @staticmethod
    def _to_data(checkout: CheckoutSession) -> dict:
        confirmed = checkout.confirmed_address
        return {
            'id': str(checkout.id),
            'phase': checkout.phase.value,
            'address': checkout.address.to_dict(),
            'payment': checkout.payment.to_dict(),
            'field_errors': dict(checkout.field_errors),
            'banner_error': checkout.banner_error,
            'cart_id': checkout.cart_id,
            'address_id': checkout.address_id,
            'confirmed_address': confirmed.to_dict() if confirmed else None,
            'is_submitting': checkout.is_submitting,
        }
