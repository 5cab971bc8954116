from .cart_serializer import (
    CartItemSerializer,
    CartSerializer,
    CartItemCreateSerializer,
    CartItemUpdateSerializer,
    PromotionApplySerializer,
)

__all__ = [
    'CartItemSerializer',
    'CartSerializer',
    'CartItemCreateSerializer',
    'CartItemUpdateSerializer',
    'PromotionApplySerializer',
]
