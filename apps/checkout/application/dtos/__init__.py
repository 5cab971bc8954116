# Checkout DTOs
from .checkout_dto import StartCheckoutDTO, CheckoutSessionDTO

__all__ = ['StartCheckoutDTO', 'CheckoutSessionDTO']
