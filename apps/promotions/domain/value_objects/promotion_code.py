"""
Promotion code value objects.
"""
import enum
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

from shared.domain import ValueObject
from apps.cart.domain.value_objects import Money


class DiscountKind(str, enum.Enum):
    PERCENTAGE = "percentage"
    FIXED_AMOUNT = "fixed_amount"

    @classmethod
    def parse(cls, raw: str) -> 'DiscountKind':
        """Accept both our names and the backend's ``deduct``."""
        value = (raw or "").strip().lower()
        if value in ("deduct", "fixed", "fixedamount"):
            return cls.FIXED_AMOUNT
        return cls(value)


@dataclass(frozen=True)
class PromotionCode(ValueObject):
    """A merchant-configured discount code.

    ``value`` is a 0..1 fraction for percentage codes and an integer of minor
    units for fixed-amount codes.
    """
    code: str
    kind: DiscountKind
    value: Union[Decimal, int]
    min_amount_minor: Optional[int] = None
    discount_id: Optional[str] = None
    starts_at: Optional[datetime] = None
    ends_at: Optional[datetime] = None

    def __post_init__(self):
        if self.kind == DiscountKind.PERCENTAGE:
            rate = Decimal(str(self.value))
            if rate < 0 or rate > 1:
                raise ValueError(f"Percentage promotion '{self.code}' must be between 0 and 1")
            object.__setattr__(self, 'value', rate)
        elif int(self.value) < 0:
            raise ValueError(f"Fixed promotion '{self.code}' cannot be negative")
        else:
            object.__setattr__(self, 'value', int(self.value))

    @property
    def normalized_code(self) -> str:
        return self.code.strip().lower()

    def matches(self, code: str) -> bool:
        """Case-insensitive code comparison."""
        return self.normalized_code == (code or "").strip().lower()

    def is_active_at(self, moment: datetime) -> bool:
        if self.starts_at and moment < self.starts_at:
            return False
        if self.ends_at and moment > self.ends_at:
            return False
        return True

    def meets_minimum(self, subtotal: Money) -> bool:
        return not self.min_amount_minor or subtotal.amount_minor >= self.min_amount_minor

    def discount_for(self, subtotal: Money) -> Money:
        """Discount on ``subtotal``; never more than the subtotal itself."""
        if self.kind == DiscountKind.PERCENTAGE:
            return subtotal.apply_percentage(self.value)
        fixed = Money(amount_minor=self.value, currency=subtotal.currency)
        return fixed.min(subtotal)


@dataclass(frozen=True)
class AppliedPromotion(ValueObject):
    """The outcome of applying a code to a given subtotal."""
    promotion: PromotionCode
    subtotal: Money
    discount: Money

    @property
    def code(self) -> str:
        return self.promotion.code

    @property
    def discount_minor(self) -> int:
        return self.discount.amount_minor

    @property
    def final_total(self) -> Money:
        return self.subtotal.subtract(self.discount)
