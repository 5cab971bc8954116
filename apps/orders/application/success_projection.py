"""
Order confirmation projection.

Builds the success-page summary from the cart as it was at submit time and
the Order the backend returned. It never looks at the live cart, which has
already been cleared by the time this runs.
"""
import random
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Callable, Optional, Tuple

from apps.cart.domain.value_objects import CartSnapshot, Money
from ..domain.entities import Order
from ..domain.value_objects import OrderNumber, OrderStatus

PAYMENT_STATUS_PAID = "Paid"


@dataclass(frozen=True)
class ConfirmationLine:
    product_id: str
    product_name: str
    quantity: int
    unit_price: Money
    line_total: Money


@dataclass(frozen=True)
class OrderConfirmation:
    """Everything the confirmation page shows."""
    order_id: str
    order_number: str
    order_date: date
    estimated_delivery: date
    line_items: Tuple[ConfirmationLine, ...]
    subtotal: Money
    discount: Money
    total: Money
    tax: Money
    grand_total: Money
    payment_method: str
    payment_status: str
    status: OrderStatus

    def to_dict(self) -> dict:
        """JSON-safe form, used for session storage and API output."""
        currency = self.subtotal.currency
        return {
            'order_id': self.order_id,
            'order_number': self.order_number,
            'order_date': self.order_date.isoformat(),
            'estimated_delivery': self.estimated_delivery.isoformat(),
            'line_items': [
                {
                    'product_id': line.product_id,
                    'product_name': line.product_name,
                    'quantity': line.quantity,
                    'unit_price_minor': line.unit_price.amount_minor,
                    'line_total_minor': line.line_total.amount_minor,
                    'line_total_display': line.line_total.to_display_string(currency),
                }
                for line in self.line_items
            ],
            'currency': currency,
            'subtotal_minor': self.subtotal.amount_minor,
            'discount_minor': self.discount.amount_minor,
            'total_minor': self.total.amount_minor,
            'tax_minor': self.tax.amount_minor,
            'grand_total_minor': self.grand_total.amount_minor,
            'grand_total_display': self.grand_total.to_display_string(currency),
            'payment_method': self.payment_method,
            'payment_status': self.payment_status,
            'status': self.status.value,
        }


class SuccessProjection:
    """Derives an OrderConfirmation; randomness and "today" are injectable."""

    def __init__(
        self,
        tax_rate: Decimal = Decimal("0.10"),
        delivery_days: Tuple[int, int] = (3, 5),
        rng: Optional[random.Random] = None,
        today: Callable[[], date] = date.today,
    ):
        self.tax_rate = Decimal(str(tax_rate))
        self.delivery_days = delivery_days
        self.rng = rng or random.Random()
        self.today = today

    def project(self, snapshot: CartSnapshot, order: Order, discount: Money) -> OrderConfirmation:
        # subtotal, discount and total always come from the same source
        if order.subtotal is not None and order.total is not None:
            subtotal, total = order.subtotal, order.total
            discount = order.discount if order.discount is not None else subtotal.subtract(total)
        else:
            subtotal = snapshot.subtotal
            total = subtotal.subtract(discount)
        tax = subtotal.apply_percentage(self.tax_rate)

        order_date = order.placed_at.date() if order.placed_at else self.today()
        estimated = order.estimated_delivery or order_date + timedelta(
            days=self.rng.randint(*self.delivery_days)
        )
        order_number = order.order_number or OrderNumber.generate(on=order_date, rng=self.rng).value

        return OrderConfirmation(
            order_id=order.order_id,
            order_number=order_number,
            order_date=order_date,
            estimated_delivery=estimated,
            line_items=self._lines(snapshot, order),
            subtotal=subtotal,
            discount=discount,
            total=total,
            tax=tax,
            grand_total=total.add(tax),
            payment_method=order.payment_method,
            payment_status=PAYMENT_STATUS_PAID,
            status=order.status,
        )

    @staticmethod
    def _lines(snapshot: CartSnapshot, order: Order) -> Tuple[ConfirmationLine, ...]:
        if order.line_items:
            return tuple(
                ConfirmationLine(
                    product_id=line.product_id,
                    product_name=line.product_name,
                    quantity=line.quantity,
                    unit_price=line.unit_price,
                    line_total=line.line_total,
                )
                for line in order.line_items
            )
        return tuple(
            ConfirmationLine(
                product_id=line.product_id,
                product_name=line.product_name,
                quantity=line.quantity,
                unit_price=line.unit_price,
                line_total=line.line_total,
            )
            for line in snapshot.lines
        )
