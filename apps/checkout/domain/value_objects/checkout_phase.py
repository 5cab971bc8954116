"""
Checkout phase value object.
"""
import enum


class CheckoutPhase(str, enum.Enum):
    PERSONAL_ADDRESS = "personal"
    PAYMENT = "payment"
    SUBMITTED = "submitted"
