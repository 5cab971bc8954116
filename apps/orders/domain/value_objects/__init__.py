# Value objects
from .order_status import OrderStatus
from .order_number import OrderNumber

__all__ = ['OrderStatus', 'OrderNumber']
