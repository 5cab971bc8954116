"""
Cart repository interface.
"""
from abc import ABC, abstractmethod

from ..entities.cart import Cart


class CartRepository(ABC):
    """Abstract repository for the session's Cart aggregate."""

    @abstractmethod
    def load(self) -> Cart:
        """Load the current cart, or a new empty one."""
        pass

    @abstractmethod
    def save(self, cart: Cart) -> Cart:
        """Save a cart."""
        pass
