# Serializers
from .checkout_serializer import (
    AddressDraftSerializer,
    PaymentDraftSerializer,
    CheckoutSessionSerializer,
    CheckoutFieldsSerializer,
)

__all__ = [
    'AddressDraftSerializer',
    'PaymentDraftSerializer',
    'CheckoutSessionSerializer',
    'CheckoutFieldsSerializer',
]
