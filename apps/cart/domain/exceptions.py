"""
Cart domain exceptions.
"""
from shared.domain.exceptions import DomainException, InsufficientStockError, ValidationError


class OutOfStockError(InsufficientStockError):
    """Raised when a product with no available stock is added to the cart."""

    def __init__(self, product_id: str, requested: int = 1):
        super().__init__(product_id=product_id, requested=requested, available=0)
        self.message = f"Product '{product_id}' is out of stock"
        self.code = "OUT_OF_STOCK"
        self.args = (self.message,)


class InvalidQuantityError(ValidationError):
    """Raised when an item quantity is not a positive integer."""

    def __init__(self, quantity):
        super().__init__(message=f"Quantity must be at least 1, got {quantity}", field="quantity")
        self.quantity = quantity


class EmptyCartError(DomainException):
    """Raised when trying to checkout an empty cart."""

    def __init__(self):
        super().__init__(
            message="Cannot checkout an empty cart",
            code="EMPTY_CART"
        )
