"""
Cart aggregate tests.
"""
import random

import pytest

from apps.cart.domain.entities import Cart
from apps.cart.domain.exceptions import InvalidQuantityError, OutOfStockError
from apps.cart.infrastructure.repositories import SessionCartRepository
from tests.fakes import DEFAULT_PRODUCTS, make_product

KEYBOARD = DEFAULT_PRODUCTS[0]


class TestAddItem:
    def test_snapshots_product_at_add_time(self):
        cart = Cart.create()
        item = cart.add_item(KEYBOARD)

        assert item.product_name == 'Mechanical Keyboard'
        assert item.unit_price_minor == 10000
        assert item.base_price_minor == 12000
        assert item.image_url == 'https://img.test/keyboard.jpg'
        assert item.savings.amount_minor == 2000

    def test_same_product_increments_quantity(self):
        cart = Cart.create()
        cart.add_item(KEYBOARD, 1)
        cart.add_item(KEYBOARD, 2)

        assert len(cart.items) == 1
        assert cart.get_item(KEYBOARD.id).quantity == 3

    def test_keeps_first_added_order(self):
        cart = Cart.create()
        cart.add_item(make_product('b'))
        cart.add_item(make_product('a'))
        cart.add_item(make_product('b'))

        assert [item.product_id for item in cart.items] == ['b', 'a']

    def test_out_of_stock_is_rejected(self):
        cart = Cart.create()
        with pytest.raises(OutOfStockError) as exc_info:
            cart.add_item(make_product('gone', available_qty=0))

        assert exc_info.value.code == 'OUT_OF_STOCK'
        assert cart.is_empty

    def test_quantity_below_one_is_rejected(self):
        with pytest.raises(InvalidQuantityError):
            Cart.create().add_item(KEYBOARD, 0)


class TestQuantities:
    def test_set_quantity_overwrites(self):
        cart = Cart.create()
        cart.add_item(KEYBOARD, 2)
        cart.set_quantity(KEYBOARD.id, 7)
        assert cart.get_item(KEYBOARD.id).quantity == 7

    def test_set_quantity_to_zero_removes_entry(self):
        cart = Cart.create()
        cart.add_item(KEYBOARD, 2)
        cart.set_quantity(KEYBOARD.id, 0)

        assert cart.get_item(KEYBOARD.id) is None
        assert cart.is_empty

    def test_set_quantity_of_unknown_product_is_noop(self):
        cart = Cart.create()
        cart.set_quantity('missing', 3)
        assert cart.is_empty

    def test_remove_item_is_idempotent(self):
        cart = Cart.create()
        cart.add_item(KEYBOARD)
        cart.remove_item(KEYBOARD.id)
        cart.remove_item(KEYBOARD.id)
        assert cart.is_empty

    def test_random_operation_sequences_keep_invariants(self):
        rng = random.Random(42)
        products = [make_product(f'p-{n}', price_minor=rng.randint(1, 9999)) for n in range(5)]
        cart = Cart.create()

        for _ in range(500):
            product = rng.choice(products)
            operation = rng.choice(['add', 'remove', 'set'])
            if operation == 'add':
                cart.add_item(product, rng.randint(1, 3))
            elif operation == 'remove':
                cart.remove_item(product.id)
            else:
                cart.set_quantity(product.id, rng.randint(-2, 5))

            ids = [item.product_id for item in cart.items]
            assert len(ids) == len(set(ids))
            assert all(item.quantity >= 1 for item in cart.items)
            assert cart.subtotal_minor == sum(
                item.unit_price_minor * item.quantity for item in cart.items
            )
            assert cart.total_item_count == sum(item.quantity for item in cart.items)


class TestTotals:
    def test_subtotal_is_deterministic_integer_fold(self):
        cart = Cart.create()
        cart.add_item(make_product('a', price_minor=1999), 3)
        cart.add_item(make_product('b', price_minor=1), 1)

        assert cart.subtotal_minor == 5998
        assert cart.subtotal_minor == cart.subtotal_minor
        assert isinstance(cart.subtotal_minor, int)

    def test_clear_empties_cart(self):
        cart = Cart.create()
        cart.add_item(KEYBOARD, 2)
        cart.clear()

        assert cart.total_item_count == 0
        assert cart.subtotal_minor == 0

    def test_snapshot_does_not_follow_later_changes(self):
        cart = Cart.create()
        cart.add_item(KEYBOARD, 2)
        snapshot = cart.snapshot()
        cart.clear()

        assert snapshot.total_items == 2
        assert snapshot.subtotal.amount_minor == 20000
        assert snapshot.lines[0].line_total.amount_minor == 20000


class TestSessionCartRepository:
    def test_round_trips_through_session_data(self):
        session = {}
        repository = SessionCartRepository(session, currency='CNY')
        cart = repository.load()
        cart.add_item(KEYBOARD, 2)
        repository.save(cart)

        restored = SessionCartRepository(session, currency='CNY').load()
        assert restored.get_item(KEYBOARD.id).quantity == 2
        assert restored.subtotal_minor == 20000

    def test_missing_session_data_gives_empty_cart(self):
        assert SessionCartRepository({}, currency='CNY').load().is_empty
