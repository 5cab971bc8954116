# Domain entities
from .product import Product, CategoryRef
from .category import Category

__all__ = ['Product', 'CategoryRef', 'Category']
