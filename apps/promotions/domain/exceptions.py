"""
Promotion domain exceptions.

Rejections are not fatal: the cart total simply stays undiscounted.
"""
from shared.domain.exceptions import BusinessRuleViolationError


class PromotionRejectedError(BusinessRuleViolationError):
    """Base class for a code that cannot be applied."""

    def __init__(self, message: str, code: str, promotion_code: str):
        super().__init__(message=message, rule=code)
        self.code = code
        self.promotion_code = promotion_code


class UnknownPromotionCodeError(PromotionRejectedError):
    """Raised when no promotion matches the entered code."""

    def __init__(self, promotion_code: str):
        super().__init__(
            message="Invalid coupon code",
            code="UNKNOWN_PROMOTION_CODE",
            promotion_code=promotion_code,
        )


class BelowMinimumAmountError(PromotionRejectedError):
    """Raised when the subtotal is below the promotion's minimum amount."""

    def __init__(self, promotion_code: str, min_amount_minor: int, subtotal_minor: int):
        super().__init__(
            message=f"Order subtotal must be at least {min_amount_minor} to use '{promotion_code}'",
            code="BELOW_MINIMUM_AMOUNT",
            promotion_code=promotion_code,
        )
        self.min_amount_minor = min_amount_minor
        self.subtotal_minor = subtotal_minor


class PromotionNotActiveError(PromotionRejectedError):
    """Raised when a code is used outside of its validity window."""

    def __init__(self, promotion_code: str):
        super().__init__(
            message=f"Coupon code '{promotion_code}' is not currently active",
            code="PROMOTION_NOT_ACTIVE",
            promotion_code=promotion_code,
        )
