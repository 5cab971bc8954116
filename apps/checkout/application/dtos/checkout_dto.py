"""
Checkout DTOs.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional

from apps.cart.domain.entities import Cart
from apps.promotions.domain.services import PromotionEngine
from ...domain.entities import CheckoutSession


@dataclass
class StartCheckoutDTO:
    """DTO for handing a cart over to checkout."""
    cart: Cart
    promotions: Optional[PromotionEngine] = None


@dataclass
class CheckoutSessionDTO:
    """DTO for checkout output."""
    phase: str
    address: Dict[str, str]
    payment: Dict[str, str]
    field_errors: Dict[str, str] = field(default_factory=dict)
    banner_error: Optional[str] = None
    cart_id: Optional[str] = None
    address_id: Optional[str] = None
    is_submitting: bool = False

    @classmethod
    def from_entity(cls, checkout: CheckoutSession) -> 'CheckoutSessionDTO':
        """Create DTO from entity. Card number and CVV are never echoed back."""
        address = checkout.address
        payment = checkout.payment
        return cls(
            phase=checkout.phase.value,
            address={
                'first_name': address.first_name,
                'last_name': address.last_name,
                'email': address.email,
                'phone': address.phone,
                'street': address.street,
                'city': address.city,
                'state': address.state,
                'postcode': address.postcode,
            },
            payment={
                'card_number': payment.masked_card_number,
                'card_name': payment.card_name,
                'expiry_date': payment.expiry_date,
                'payment_method': payment.payment_method,
            },
            field_errors=dict(checkout.field_errors),
            banner_error=checkout.banner_error,
            cart_id=checkout.cart_id,
            address_id=checkout.address_id,
            is_submitting=checkout.is_submitting,
        )
