"""
Payment draft value object.
"""
from dataclasses import dataclass

from shared.domain import ValueObject

PAYMENT_METHODS = ("Credit Card", "PayPal", "Apple Pay")
DEFAULT_PAYMENT_METHOD = "Credit Card"


@dataclass(frozen=True)
class PaymentDraft(ValueObject):
    """Card details as typed by the shopper. Only checked syntactically."""
    card_number: str = ""
    card_name: str = ""
    expiry_date: str = ""
    cvv: str = ""
    payment_method: str = DEFAULT_PAYMENT_METHOD

    @property
    def masked_card_number(self) -> str:
        digits = "".join(self.card_number.split())
        if len(digits) < 4:
            return ""
        return f"**** **** **** {digits[-4:]}"
