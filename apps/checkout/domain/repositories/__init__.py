# Repository interfaces
from .session_store import (
    SessionStore,
    USER_TOKEN_KEY,
    CART_ID_KEY,
    ADDRESS_ID_KEY,
    DISCOUNT_ID_KEY,
)
from .checkout_repository import CheckoutRepository

__all__ = [
    'SessionStore',
    'USER_TOKEN_KEY',
    'CART_ID_KEY',
    'ADDRESS_ID_KEY',
    'DISCOUNT_ID_KEY',
    'CheckoutRepository',
]
