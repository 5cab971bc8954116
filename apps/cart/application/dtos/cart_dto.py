"""
Cart DTOs.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from ...domain.entities import CartItem
from ...domain.value_objects import Money
from ...infrastructure.cart_state import CartState


@dataclass
class CartItemDTO:
    """DTO for cart item output."""
    product_id: str
    product_name: str
    description: str
    image_url: Optional[str]
    unit_price_minor: int
    base_price_minor: int
    quantity: int
    subtotal_minor: int
    savings_minor: int
    subtotal_display: str

    @classmethod
    def from_entity(cls, item: CartItem) -> 'CartItemDTO':
        return cls(
            product_id=item.product_id,
            product_name=item.product_name,
            description=item.description,
            image_url=item.image_url,
            unit_price_minor=item.unit_price_minor,
            base_price_minor=item.base_price_minor,
            quantity=item.quantity,
            subtotal_minor=item.subtotal.amount_minor,
            savings_minor=item.savings.amount_minor,
            subtotal_display=item.subtotal.to_display_string(),
        )


@dataclass
class AppliedPromotionDTO:
    """DTO for the promotion currently applied to the cart."""
    code: str
    kind: str
    discount_minor: int
    discount_id: Optional[str] = None


@dataclass
class CartDTO:
    """DTO for cart output."""
    currency: str
    items: List[CartItemDTO] = field(default_factory=list)
    total_items: int = 0
    subtotal_minor: int = 0
    discount_minor: int = 0
    total_minor: int = 0
    subtotal_display: str = ""
    total_display: str = ""
    promotion: Optional[AppliedPromotionDTO] = None

    @classmethod
    def from_state(cls, state: CartState) -> 'CartDTO':
        cart = state.cart
        subtotal = cart.subtotal
        promotion = state.promotions.promotion
        total = Money(amount_minor=state.total_minor, currency=cart.currency)
        return cls(
            currency=cart.currency,
            items=[CartItemDTO.from_entity(item) for item in cart.items],
            total_items=cart.total_item_count,
            subtotal_minor=subtotal.amount_minor,
            discount_minor=state.discount_minor,
            total_minor=state.total_minor,
            subtotal_display=subtotal.to_display_string(),
            total_display=total.to_display_string(),
            promotion=AppliedPromotionDTO(
                code=promotion.code,
                kind=promotion.kind.value,
                discount_minor=state.discount_minor,
                discount_id=promotion.discount_id,
            ) if promotion else None,
        )
