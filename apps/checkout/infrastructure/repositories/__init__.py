from .session_checkout_repository import SessionCheckoutRepository

__all__ = ['SessionCheckoutRepository']
