# Value objects
from .money import Money, DEFAULT_CURRENCY
from .cart_snapshot import CartLineSnapshot, CartSnapshot

__all__ = ['Money', 'DEFAULT_CURRENCY', 'CartLineSnapshot', 'CartSnapshot']
