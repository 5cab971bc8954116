"""
Checkout serializers.
"""
from rest_framework import serializers


class AddressDraftSerializer(serializers.Serializer):
    """Serializer for the personal details and shipping address form."""
    first_name = serializers.CharField(read_only=True)
    last_name = serializers.CharField(read_only=True)
    email = serializers.CharField(read_only=True)
    phone = serializers.CharField(read_only=True)
    street = serializers.CharField(read_only=True)
    city = serializers.CharField(read_only=True)
    state = serializers.CharField(read_only=True)
    postcode = serializers.CharField(read_only=True)


class PaymentDraftSerializer(serializers.Serializer):
    """Serializer for the payment form. The card number arrives masked."""
    card_number = serializers.CharField(read_only=True)
    card_name = serializers.CharField(read_only=True)
    expiry_date = serializers.CharField(read_only=True)
    payment_method = serializers.CharField(read_only=True)


class CheckoutSessionSerializer(serializers.Serializer):
    """Serializer for checkout output."""
    phase = serializers.CharField(read_only=True)
    address = AddressDraftSerializer(read_only=True)
    payment = PaymentDraftSerializer(read_only=True)
    field_errors = serializers.DictField(child=serializers.CharField(), read_only=True)
    banner_error = serializers.CharField(read_only=True, allow_null=True)
    cart_id = serializers.CharField(read_only=True, allow_null=True)
    address_id = serializers.CharField(read_only=True, allow_null=True)
    is_submitting = serializers.BooleanField(read_only=True)


class CheckoutFieldsSerializer(serializers.Serializer):
    """Serializer for form edits: ``{"updates": {"email": "...", ...}}``."""
    updates = serializers.DictField(
        child=serializers.CharField(allow_blank=True, trim_whitespace=False),
        allow_empty=False,
    )
