"""
Promotion repository interface.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..value_objects.promotion_code import PromotionCode


class PromotionRepository(ABC):
    """Lookup of merchant-configured promotion codes."""

    @abstractmethod
    def find_by_code(self, code: str) -> Optional[PromotionCode]:
        """Find a promotion by code, ignoring case."""
        pass

    @abstractmethod
    def find_all(self) -> List[PromotionCode]:
        """List every configured promotion."""
        pass
