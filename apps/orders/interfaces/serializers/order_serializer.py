"""
Order confirmation serializers.

Input is ``OrderConfirmation.to_dict()``, the form kept in the session.
"""
from rest_framework import serializers


class ConfirmationLineSerializer(serializers.Serializer):
    """Serializer for a purchased line."""
    product_id = serializers.CharField(read_only=True)
    product_name = serializers.CharField(read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    unit_price_minor = serializers.IntegerField(read_only=True)
    line_total_minor = serializers.IntegerField(read_only=True)
    line_total_display = serializers.CharField(read_only=True)


class OrderConfirmationSerializer(serializers.Serializer):
    """Serializer for the order confirmation page."""
    order_id = serializers.CharField(read_only=True)
    order_number = serializers.CharField(read_only=True)
    order_date = serializers.DateField(read_only=True)
    estimated_delivery = serializers.DateField(read_only=True)
    line_items = ConfirmationLineSerializer(many=True, read_only=True)
    currency = serializers.CharField(read_only=True)
    subtotal_minor = serializers.IntegerField(read_only=True)
    discount_minor = serializers.IntegerField(read_only=True)
    total_minor = serializers.IntegerField(read_only=True)
    tax_minor = serializers.IntegerField(read_only=True)
    grand_total_minor = serializers.IntegerField(read_only=True)
    grand_total_display = serializers.CharField(read_only=True)
    payment_method = serializers.CharField(read_only=True)
    payment_status = serializers.CharField(read_only=True)
    status = serializers.CharField(read_only=True)
