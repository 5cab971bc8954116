"""
Order status value object.
"""
import enum


class OrderStatus(str, enum.Enum):
    PENDING = "pending"
    PAID = "paid"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @classmethod
    def parse(cls, raw) -> 'OrderStatus':
        """Map a backend status string; anything unrecognised counts as pending."""
        try:
            return cls(str(raw or '').strip().lower())
        except ValueError:
            return cls.PENDING
