"""
Remembers the applied promotion code in the browser session.
"""
import logging
from typing import MutableMapping

from ..domain.exceptions import PromotionRejectedError
from ..domain.repositories.promotion_repository import PromotionRepository
from ..domain.services.promotion_engine import PromotionEngine

logger = logging.getLogger(__name__)

PROMOTION_SESSION_KEY = 'promotionCode'


def load_engine(
    session: MutableMapping,
    repository: PromotionRepository,
    currency: str,
    subtotal_minor: int,
) -> PromotionEngine:
    """Rebuild the engine, re-applying the remembered code if it still validates."""
    engine = PromotionEngine(repository, currency=currency)
    code = session.get(PROMOTION_SESSION_KEY)
    if code:
        try:
            engine.apply(code, subtotal_minor)
        except PromotionRejectedError as e:
            logger.info(f"Dropping remembered promotion '{code}': {e.message}")
            session.pop(PROMOTION_SESSION_KEY, None)
    return engine


def save_engine(session: MutableMapping, engine: PromotionEngine) -> None:
    if engine.promotion is None:
        session.pop(PROMOTION_SESSION_KEY, None)
    else:
        session[PROMOTION_SESSION_KEY] = engine.promotion.code
