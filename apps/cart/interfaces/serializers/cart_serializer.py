"""
Cart serializers.
"""
from rest_framework import serializers


class CartItemSerializer(serializers.Serializer):
    """Serializer for cart item output."""
    product_id = serializers.CharField(read_only=True)
    product_name = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    image_url = serializers.CharField(read_only=True, allow_null=True)
    unit_price_minor = serializers.IntegerField(read_only=True)
    base_price_minor = serializers.IntegerField(read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    subtotal_minor = serializers.IntegerField(read_only=True)
    savings_minor = serializers.IntegerField(read_only=True)
    subtotal_display = serializers.CharField(read_only=True)


class AppliedPromotionSerializer(serializers.Serializer):
    """Serializer for the applied promotion."""
    code = serializers.CharField(read_only=True)
    kind = serializers.CharField(read_only=True)
    discount_minor = serializers.IntegerField(read_only=True)
    discount_id = serializers.CharField(read_only=True, allow_null=True)


class CartSerializer(serializers.Serializer):
    """Serializer for cart output."""
    currency = serializers.CharField(read_only=True)
    items = CartItemSerializer(many=True, read_only=True)
    total_items = serializers.IntegerField(read_only=True)
    subtotal_minor = serializers.IntegerField(read_only=True)
    discount_minor = serializers.IntegerField(read_only=True)
    total_minor = serializers.IntegerField(read_only=True)
    subtotal_display = serializers.CharField(read_only=True)
    total_display = serializers.CharField(read_only=True)
    promotion = AppliedPromotionSerializer(read_only=True, allow_null=True)


class CartItemCreateSerializer(serializers.Serializer):
    """Serializer for adding item to cart."""
    product_id = serializers.CharField(max_length=64)
    quantity = serializers.IntegerField(min_value=1, default=1)


class CartItemUpdateSerializer(serializers.Serializer):
    """Serializer for updating cart item. Zero removes the item."""
    quantity = serializers.IntegerField(min_value=0)


class PromotionApplySerializer(serializers.Serializer):
    """Serializer for applying a coupon code."""
    code = serializers.CharField(max_length=64, trim_whitespace=True)
