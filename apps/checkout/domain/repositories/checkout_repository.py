"""
Checkout session repository interface.
"""
from abc import ABC, abstractmethod
from typing import Optional

from ..entities.checkout_session import CheckoutSession


class CheckoutRepository(ABC):
    """Abstract repository for the in-progress CheckoutSession."""

    @abstractmethod
    def load(self) -> Optional[CheckoutSession]:
        """Load the current checkout, if one was started."""
        pass

    @abstractmethod
    def save(self, checkout: CheckoutSession) -> CheckoutSession:
        """Save a checkout session."""
        pass

    @abstractmethod
    def delete(self) -> None:
        """Discard the checkout session."""
        pass

    def publish(self, checkout: CheckoutSession) -> CheckoutSession:
        """Save and make the checkout visible to the shopper's other requests."""
        return self.save(checkout)

    def reload(self) -> Optional[CheckoutSession]:
        """The checkout as currently stored, including other requests' changes."""
        return self.load()
