"""
Order number value object.
"""
import random
import string
from dataclasses import dataclass
from datetime import date
from typing import Optional

from shared.domain import ValueObject


@dataclass(frozen=True)
class OrderNumber(ValueObject):
    """Order number value object."""
    value: str

    @classmethod
    def generate(cls, on: Optional[date] = None, rng: Optional[random.Random] = None) -> 'OrderNumber':
        """Generate a new order number."""
        rng = rng or random
        date_part = (on or date.today()).strftime("%Y%m%d")
        random_part = ''.join(rng.choices(string.ascii_uppercase + string.digits, k=6))
        return cls(value=f"ORD-{date_part}-{random_part}")

    def __str__(self) -> str:
        return self.value
