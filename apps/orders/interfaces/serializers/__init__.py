# Serializers
from .order_serializer import ConfirmationLineSerializer, OrderConfirmationSerializer

__all__ = ['ConfirmationLineSerializer', 'OrderConfirmationSerializer']
