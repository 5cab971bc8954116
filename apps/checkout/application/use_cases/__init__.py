# Use cases
from .start_checkout import StartCheckoutUseCase

__all__ = ['StartCheckoutUseCase']
