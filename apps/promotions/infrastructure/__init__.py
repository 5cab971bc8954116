from .repositories import ConfiguredPromotionRepository, promotion_from_record

__all__ = ['ConfiguredPromotionRepository', 'promotion_from_record']
