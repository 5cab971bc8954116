"""
Loads and saves the shopper's cart together with its applied promotion.
"""
from dataclasses import dataclass
from typing import MutableMapping

from django.conf import settings

from apps.promotions.domain.services import PromotionEngine
from apps.promotions.infrastructure import ConfiguredPromotionRepository
from apps.promotions.infrastructure.session_promotion_state import load_engine, save_engine
from ..domain.entities import Cart
from .repositories import SessionCartRepository


@dataclass
class CartState:
    """The cart and the promotion engine priced against it."""
    cart: Cart
    promotions: PromotionEngine

    @property
    def discount_minor(self) -> int:
        return self.promotions.discount_minor(self.cart.subtotal_minor)

    @property
    def total_minor(self) -> int:
        return self.promotions.final_total_minor(self.cart.subtotal_minor)


def load_cart_state(session: MutableMapping) -> CartState:
    currency = settings.STOREFRONT_CURRENCY
    cart = SessionCartRepository(session, currency=currency).load()
    promotions = load_engine(
        session,
        ConfiguredPromotionRepository(),
        currency=currency,
        subtotal_minor=cart.subtotal_minor,
    )
    return CartState(cart=cart, promotions=promotions)


def save_cart_state(session: MutableMapping, state: CartState) -> None:
    SessionCartRepository(session, currency=state.cart.currency).save(state.cart)
    save_engine(session, state.promotions)
