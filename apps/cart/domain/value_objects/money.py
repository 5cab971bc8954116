"""
Money value object.

Amounts are integers in minor currency units (cents). Conversion to major
units happens only in ``to_display_string``.
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_FLOOR
from typing import Iterable, Union

from shared.domain import ValueObject

DEFAULT_CURRENCY = "CNY"

CURRENCY_SYMBOLS = {
    "AUD": "$",
    "USD": "$",
    "CNY": "¥",
    "EUR": "€",
    "GBP": "£",
}


@dataclass(frozen=True)
class Money(ValueObject):
    """Money value object with currency."""
    amount_minor: int
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self):
        if isinstance(self.amount_minor, bool) or not isinstance(self.amount_minor, int):
            raise TypeError(f"Money amount must be an integer of minor units, got {self.amount_minor!r}")

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> 'Money':
        return cls(amount_minor=0, currency=currency)

    @classmethod
    def total(cls, amounts: Iterable['Money'], currency: str = DEFAULT_CURRENCY) -> 'Money':
        """Sum a sequence of money values."""
        result = cls.zero(currency)
        for amount in amounts:
            result = result.add(amount)
        return result

    def _check_currency(self, other: 'Money', operation: str) -> None:
        if self.currency != other.currency:
            raise ValueError(f"Cannot {operation} different currencies")

    def add(self, other: 'Money') -> 'Money':
        """Add two money values."""
        self._check_currency(other, "add")
        return Money(amount_minor=self.amount_minor + other.amount_minor, currency=self.currency)

    def subtract(self, other: 'Money') -> 'Money':
        """Subtract money value."""
        self._check_currency(other, "subtract")
        return Money(amount_minor=self.amount_minor - other.amount_minor, currency=self.currency)

    def multiply_by_quantity(self, quantity: int) -> 'Money':
        """Multiply money by an item quantity."""
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise TypeError(f"Quantity must be an integer, got {quantity!r}")
        return Money(amount_minor=self.amount_minor * quantity, currency=self.currency)

    def apply_percentage(self, fraction: Union[Decimal, float, str]) -> 'Money':
        """Take ``fraction`` (0..1) of this amount, rounded down to a whole minor unit."""
        rate = fraction if isinstance(fraction, Decimal) else Decimal(str(fraction))
        if rate < 0 or rate > 1:
            raise ValueError(f"Percentage fraction must be between 0 and 1, got {fraction}")
        part = (Decimal(self.amount_minor) * rate).to_integral_value(rounding=ROUND_FLOOR)
        return Money(amount_minor=int(part), currency=self.currency)

    def min(self, other: 'Money') -> 'Money':
        """The smaller of two amounts."""
        self._check_currency(other, "compare")
        return self if self.amount_minor <= other.amount_minor else other

    @property
    def is_zero(self) -> bool:
        return self.amount_minor == 0

    def to_display_string(self, currency_code: str = None) -> str:
        """Format for display, e.g. ``¥1,234.50``."""
        code = currency_code or self.currency
        sign = "-" if self.amount_minor < 0 else ""
        major, minor = divmod(abs(self.amount_minor), 100)
        number = f"{major:,}.{minor:02d}"
        symbol = CURRENCY_SYMBOLS.get(code)
        if symbol:
            return f"{sign}{symbol}{number}"
        return f"{sign}{code} {number}"

    @property
    def formatted(self) -> str:
        """Get formatted money string."""
        return self.to_display_string()

    def __str__(self) -> str:
        return self.formatted
