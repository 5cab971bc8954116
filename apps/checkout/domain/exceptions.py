"""
Checkout domain exceptions.
"""
from shared.domain.exceptions import DomainException, InvalidOperationError


class InvalidCheckoutStateError(InvalidOperationError):
    """Raised when a checkout operation is invalid for the current phase."""

    def __init__(self, operation: str, current_state: str):
        super().__init__(
            message=f"Cannot {operation} checkout in '{current_state}' phase",
            operation=operation,
            state=current_state,
        )


class CheckoutNotStartedError(DomainException):
    """Raised when a checkout operation is requested without a checkout session."""

    def __init__(self):
        super().__init__(
            message="Checkout has not been started",
            code="CHECKOUT_NOT_STARTED"
        )
