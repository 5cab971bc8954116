"""
Django session implementation of CartRepository.
"""
from typing import MutableMapping

from ...domain.entities.cart import Cart
from ...domain.entities.cart_item import CartItem
from ...domain.repositories.cart_repository import CartRepository

CART_SESSION_KEY = 'cart'


class SessionCartRepository(CartRepository):
    """Keeps the cart in the browser session as plain JSON-safe data."""

    def __init__(self, session: MutableMapping, currency: str):
        self.session = session
        self.currency = currency

    def load(self) -> Cart:
        data = self.session.get(CART_SESSION_KEY)
        if not data:
            return Cart.create(currency=self.currency)
        return self._to_entity(data)

    def save(self, cart: Cart) -> Cart:
        self.session[CART_SESSION_KEY] = self._to_data(cart)
        return cart

    def _to_entity(self, data: dict) -> Cart:
        cart = Cart.create(currency=data.get('currency', self.currency))
        cart.items = [
            CartItem(
                product_id=row['product_id'],
                product_name=row['product_name'],
                unit_price_minor=row['unit_price_minor'],
                base_price_minor=row.get('base_price_minor', row['unit_price_minor']),
                quantity=row['quantity'],
                description=row.get('description', ''),
                image_url=row.get('image_url'),
                currency=cart.currency,
            )
            for row in data.get('items', [])
            if row.get('quantity', 0) >= 1
        ]
        return cart

    @staticmethod
    def _to_data(cart: Cart) -> dict:
        return {
            'currency': cart.currency,
            'items': [
                {
                    'product_id': item.product_id,
                    'product_name': item.product_name,
                    'unit_price_minor': item.unit_price_minor,
                    'base_price_minor': item.base_price_minor,
                    'quantity': item.quantity,
                    'description': item.description,
                    'image_url': item.image_url,
                }
                for item in cart.items
            ],
        }
