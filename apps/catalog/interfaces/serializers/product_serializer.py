"""
Product serializers.
"""
from rest_framework import serializers


class ProductSerializer(serializers.Serializer):
    """Serializer for product output."""
    id = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    base_price_minor = serializers.IntegerField(read_only=True)
    discount_price_minor = serializers.IntegerField(read_only=True)
    available_qty = serializers.IntegerField(read_only=True)
    is_in_stock = serializers.BooleanField(read_only=True)
    images = serializers.ListField(child=serializers.CharField(), read_only=True)
    category_id = serializers.CharField(source='category.id', read_only=True, allow_null=True)
    category_name = serializers.CharField(source='category.name', read_only=True, allow_null=True)
