"""
Promotion engine.

Validates an entered code against the promotion table and keeps at most one
promotion applied at a time.
"""
import logging
from datetime import datetime
from typing import Callable, Optional

from shared.domain import utc_now
from apps.cart.domain.value_objects import Money, DEFAULT_CURRENCY
from ..exceptions import (
    BelowMinimumAmountError,
    PromotionNotActiveError,
    UnknownPromotionCodeError,
)
from ..repositories.promotion_repository import PromotionRepository
from ..value_objects.promotion_code import AppliedPromotion, PromotionCode

logger = logging.getLogger(__name__)


class PromotionEngine:
    """Single-slot promotion state for one cart."""

    def __init__(
        self,
        repository: PromotionRepository,
        currency: str = DEFAULT_CURRENCY,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.repository = repository
        self.currency = currency
        self.clock = clock
        self._promotion: Optional[PromotionCode] = None

    @property
    def promotion(self) -> Optional[PromotionCode]:
        """The currently applied promotion, if any."""
        return self._promotion

    def apply(self, code: str, subtotal_minor: int) -> AppliedPromotion:
        """Apply ``code``, replacing any previous promotion.

        A rejected code leaves the current promotion in place.
        """
        promotion = self.repository.find_by_code(code)
        if promotion is None:
            logger.info(f"Rejected unknown promotion code '{code}'")
            raise UnknownPromotionCodeError(code)
        if not promotion.is_active_at(self.clock()):
            logger.info(f"Rejected inactive promotion code '{code}'")
            raise PromotionNotActiveError(promotion.code)

        subtotal = Money(amount_minor=subtotal_minor, currency=self.currency)
        if not promotion.meets_minimum(subtotal):
            logger.info(f"Rejected promotion '{code}': subtotal {subtotal_minor} below minimum")
            raise BelowMinimumAmountError(promotion.code, promotion.min_amount_minor, subtotal_minor)

        self._promotion = promotion
        applied = AppliedPromotion(
            promotion=promotion,
            subtotal=subtotal,
            discount=promotion.discount_for(subtotal),
        )
        logger.info(f"Applied promotion '{promotion.code}': discount {applied.discount_minor}")
        return applied

    def remove(self) -> None:
        """Clear the applied promotion."""
        self._promotion = None

    def evaluate(self, subtotal_minor: int) -> Optional[AppliedPromotion]:
        """Re-price the applied promotion against a (possibly changed) subtotal.

        Returns None when nothing is applied or the subtotal no longer meets the
        promotion's minimum; the promotion itself stays selected.
        """
        if self._promotion is None:
            return None
        subtotal = Money(amount_minor=subtotal_minor, currency=self.currency)
        if not self._promotion.meets_minimum(subtotal):
            return None
        return AppliedPromotion(
            promotion=self._promotion,
            subtotal=subtotal,
            discount=self._promotion.discount_for(subtotal),
        )

    def discount_minor(self, subtotal_minor: int) -> int:
        applied = self.evaluate(subtotal_minor)
        return applied.discount_minor if applied else 0

    def final_total_minor(self, subtotal_minor: int) -> int:
        """Subtotal less the current discount; never negative."""
        return max(subtotal_minor - self.discount_minor(subtotal_minor), 0)

    @property
    def discount_id(self) -> Optional[str]:
        """Server-side discount record id of the applied promotion."""
        return self._promotion.discount_id if self._promotion else None
