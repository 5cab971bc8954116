"""
Order domain exceptions.
"""
from shared.domain.exceptions import EntityNotFoundError


class OrderConfirmationNotFoundError(EntityNotFoundError):
    """Raised when no order confirmation is available for the session."""

    def __init__(self):
        super().__init__(entity_name="OrderConfirmation", entity_id="current")
        self.message = "No completed order to confirm"
        self.code = "ORDER_CONFIRMATION_NOT_FOUND"
        self.args = (self.message,)
