# Cart DTOs
from .cart_dto import CartItemDTO, CartDTO, AppliedPromotionDTO

__all__ = ['CartItemDTO', 'CartDTO', 'AppliedPromotionDTO']
