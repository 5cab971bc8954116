from .promotion_repository import PromotionRepository

__all__ = ['PromotionRepository']
