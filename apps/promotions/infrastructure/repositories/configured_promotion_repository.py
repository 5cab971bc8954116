"""
Promotion table loaded from settings.
"""
from typing import Iterable, List, Optional

from dateutil.parser import isoparse
from dateutil.tz import tzutc
from django.conf import settings

from ...domain.repositories.promotion_repository import PromotionRepository
from ...domain.value_objects.promotion_code import DiscountKind, PromotionCode


def _parse_time(raw):
    if not raw:
        return None
    moment = isoparse(raw) if isinstance(raw, str) else raw
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=tzutc())
    return moment


def promotion_from_record(record: dict) -> PromotionCode:
    """Build a PromotionCode from a settings / backend style record.

    Backend records use ``discount_type`` of ``percentage`` or ``deduct`` and
    spell the start time ``strat_time``.
    """
    return PromotionCode(
        code=record['code'],
        kind=DiscountKind.parse(record.get('discount_type', DiscountKind.PERCENTAGE.value)),
        value=record['value'],
        min_amount_minor=record.get('min_amount') or None,
        discount_id=record.get('discount_id') or record.get('_id'),
        starts_at=_parse_time(record.get('start_time') or record.get('strat_time')),
        ends_at=_parse_time(record.get('end_time')),
    )


class ConfiguredPromotionRepository(PromotionRepository):
    """Fixed, case-insensitive promotion table."""

    def __init__(self, records: Optional[Iterable[dict]] = None):
        if records is None:
            records = settings.STOREFRONT_PROMOTION_CODES
        self._promotions = {}
        for record in records:
            promotion = promotion_from_record(record)
            self._promotions[promotion.normalized_code] = promotion

    def find_by_code(self, code: str) -> Optional[PromotionCode]:
        return self._promotions.get((code or '').strip().lower())

    def find_all(self) -> List[PromotionCode]:
        return list(self._promotions.values())
