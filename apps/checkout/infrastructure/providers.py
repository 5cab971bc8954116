"""
Checkout collaborator providers.
"""
from decimal import Decimal
from functools import lru_cache

from django.conf import settings
from django.utils.module_loading import import_string

from apps.orders.application import SuccessProjection
from ..domain.gateways import OrderSubmissionGateway


@lru_cache(maxsize=1)
def get_order_gateway() -> OrderSubmissionGateway:
    """Process-wide gateway built from STOREFRONT_ORDER_GATEWAY."""
    return import_string(settings.STOREFRONT_ORDER_GATEWAY)()


def get_success_projection() -> SuccessProjection:
    return SuccessProjection(
        tax_rate=Decimal(str(settings.STOREFRONT_TAX_RATE)),
        delivery_days=(settings.STOREFRONT_DELIVERY_DAYS_MIN, settings.STOREFRONT_DELIVERY_DAYS_MAX),
    )
