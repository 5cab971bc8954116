# Domain events
from .order_placed import OrderPlaced

__all__ = ['OrderPlaced']
