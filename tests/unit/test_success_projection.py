"""
Success projection tests.
"""
import random
from datetime import date, datetime, timezone
from decimal import Decimal

from apps.cart.domain.entities import Cart
from apps.cart.domain.value_objects import Money
from apps.orders.application import SuccessProjection
from apps.orders.domain.entities import Order, OrderLine
from apps.orders.domain.value_objects import OrderStatus
from tests.fakes import make_product

TODAY = date(2026, 3, 2)


def snapshot():
    cart = Cart.create()
    cart.add_item(make_product('p-1', price_minor=4000, name='Lamp'), 2)
    cart.add_item(make_product('p-2', price_minor=2005, name='Bulb'), 1)
    return cart.snapshot()


def projection(**kwargs):
    return SuccessProjection(rng=random.Random(7), today=lambda: TODAY, **kwargs)


class TestFallbacks:
    def test_uses_snapshot_when_backend_sends_no_totals(self):
        confirmation = projection().project(snapshot(), Order(order_id='o-1', payment_method='PayPal'), Money(1000))

        assert confirmation.subtotal == Money(10005)
        assert confirmation.discount == Money(1000)
        assert confirmation.total == Money(9005)
        assert [line.product_name for line in confirmation.line_items] == ['Lamp', 'Bulb']
        assert confirmation.payment_method == 'PayPal'
        assert confirmation.payment_status == 'Paid'

    def test_partial_backend_amounts_are_ignored(self):
        order = Order(order_id='o-1', payment_method='PayPal', total=Money(5000))

        confirmation = projection().project(snapshot(), order, Money(1000))

        assert confirmation.subtotal == Money(10005)
        assert confirmation.total == Money(9005)
        assert confirmation.subtotal.subtract(confirmation.discount) == confirmation.total

    def test_tax_is_floored_and_added_to_total(self):
        confirmation = projection().project(snapshot(), Order(order_id='o-1', payment_method='PayPal'), Money(0))

        assert confirmation.tax == Money(1000)
        assert confirmation.grand_total == Money(11005)

    def test_tax_rate_is_configurable(self):
        confirmation = projection(tax_rate=Decimal('0.15')).project(
            snapshot(), Order(order_id='o-1', payment_method='PayPal'), Money(0)
        )
        assert confirmation.tax == Money(1500)

    def test_generated_order_number_and_delivery_window(self):
        confirmation = projection().project(snapshot(), Order(order_id='o-1', payment_method='PayPal'), Money(0))

        assert confirmation.order_number.startswith('ORD-20260302-')
        assert len(confirmation.order_number) == len('ORD-20260302-') + 6
        assert confirmation.order_date == TODAY
        assert 3 <= (confirmation.estimated_delivery - TODAY).days <= 5

    def test_same_seed_gives_same_projection(self):
        order = Order(order_id='o-1', payment_method='PayPal')
        first = projection().project(snapshot(), order, Money(0))
        second = projection().project(snapshot(), order, Money(0))
        assert first == second


class TestBackendValues:
    def test_backend_values_win(self):
        order = Order(
            order_id='o-9',
            payment_method='Apple Pay',
            status=OrderStatus.PAID,
            line_items=(OrderLine('p-1', 'Lamp', 1, Money(4000), Money(4000)),),
            subtotal=Money(4000),
            discount=Money(400),
            total=Money(3600),
            order_number='TRK-123',
            placed_at=datetime(2026, 1, 5, 10, 0, tzinfo=timezone.utc),
            estimated_delivery=date(2026, 1, 9),
        )

        confirmation = projection().project(snapshot(), order, Money(0))

        assert confirmation.order_number == 'TRK-123'
        assert confirmation.order_date == date(2026, 1, 5)
        assert confirmation.estimated_delivery == date(2026, 1, 9)
        assert confirmation.total == Money(3600)
        assert confirmation.discount == Money(400)
        assert confirmation.tax == Money(400)
        assert len(confirmation.line_items) == 1
        assert confirmation.status == OrderStatus.PAID

    def test_to_dict_is_json_safe(self):
        confirmation = projection().project(snapshot(), Order(order_id='o-1', payment_method='PayPal'), Money(0))
        data = confirmation.to_dict()

        assert data['order_date'] == '2026-03-02'
        assert data['grand_total_minor'] == 11005
        assert data['grand_total_display'] == '¥110.05'
        assert data['line_items'][0]['line_total_minor'] == 8000
