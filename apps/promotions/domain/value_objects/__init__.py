# Value objects
from .promotion_code import AppliedPromotion, DiscountKind, PromotionCode

__all__ = ['AppliedPromotion', 'DiscountKind', 'PromotionCode']
