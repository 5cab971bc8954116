"""
Maps commerce backend order payloads onto Order entities.
"""
from typing import Optional

from dateutil.parser import isoparse

from apps.cart.domain.value_objects import Money
from ..domain.entities import Order, OrderLine
from ..domain.value_objects import OrderStatus


def _money(raw, currency: str) -> Optional[Money]:
    if raw is None:
        return None
    return Money(amount_minor=int(raw), currency=currency)


def _line_from_payload(data: dict, currency: str) -> OrderLine:
    quantity = int(data.get('qty', data.get('quantity', 1)))
    unit_price = Money(amount_minor=int(data.get('unit_price', 0)), currency=currency)
    total_price = data.get('total_price')
    return OrderLine(
        product_id=str(data.get('product_id', '')),
        product_name=data.get('product_name', ''),
        quantity=quantity,
        unit_price=unit_price,
        line_total=_money(total_price, currency) if total_price is not None
        else unit_price.multiply_by_quantity(quantity),
    )


def order_from_payload(data: dict, payment_method: str, currency: str) -> Order:
    """Build an Order from a ``/order/create`` response.

    ``total_amount`` is the pre-discount amount and ``sale_amount`` what the
    shopper pays; either may be missing, in which case the confirmation falls
    back to the cart snapshot.
    """
    subtotal = _money(data.get('total_amount'), currency)
    total = _money(data.get('sale_amount'), currency)
    discount = subtotal.subtract(total) if subtotal is not None and total is not None else None

    placed_at = data.get('placed_at')
    estimated = data.get('estimated_delivery')
    return Order(
        order_id=str(data.get('order_id') or data.get('_id') or ''),
        payment_method=data.get('payment_method') or payment_method,
        status=OrderStatus.parse(data.get('status')),
        line_items=tuple(_line_from_payload(item, currency) for item in data.get('order_items') or ()),
        subtotal=subtotal,
        discount=discount,
        total=total,
        order_number=data.get('track_number') or None,
        placed_at=isoparse(placed_at) if placed_at else None,
        estimated_delivery=isoparse(estimated).date() if estimated else None,
    )
