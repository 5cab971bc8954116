# Serializers
from .product_serializer import ProductSerializer
from .category_serializer import CategorySerializer

__all__ = ['ProductSerializer', 'CategorySerializer']
