"""
Address value objects.
"""
from dataclasses import dataclass

from shared.domain import ValueObject

AUSTRALIAN_STATES = {
    "NSW": "New South Wales",
    "VIC": "Victoria",
    "QLD": "Queensland",
    "WA": "Western Australia",
    "SA": "South Australia",
    "TAS": "Tasmania",
    "ACT": "Australian Capital Territory",
    "NT": "Northern Territory",
}

DEFAULT_STATE = "NSW"


@dataclass(frozen=True)
class Address(ValueObject):
    """Shipping address as sent to the commerce backend."""
    recipient_name: str
    street: str
    city: str
    state: str
    phone: str
    is_default: bool = True


@dataclass(frozen=True)
class AddressDraft(ValueObject):
    """Personal details and shipping address as typed by the shopper."""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    street: str = ""
    city: str = ""
    state: str = DEFAULT_STATE
    postcode: str = ""

    @property
    def recipient_name(self) -> str:
        return f"{self.first_name.strip()} {self.last_name.strip()}".strip()

    def to_address(self, is_default: bool = True) -> Address:
        return Address(
            recipient_name=self.recipient_name,
            street=self.street.strip(),
            city=self.city.strip(),
            state=self.state,
            phone=self.phone.strip(),
            is_default=is_default,
        )
