# Domain entities
from .checkout_session import CheckoutSession

__all__ = ['CheckoutSession']
