"""
Cart entity (Aggregate Root).
"""
from dataclasses import dataclass, field
from typing import List, Optional

from shared.domain import AggregateRoot
from apps.catalog.domain.entities import Product
from ..exceptions import InvalidQuantityError, OutOfStockError
from ..value_objects.cart_snapshot import CartLineSnapshot, CartSnapshot
from ..value_objects.money import Money, DEFAULT_CURRENCY
from .cart_item import CartItem


@dataclass
class Cart(AggregateRoot):
    """Shopping cart owned by a single browser session.

    Holds at most one item per product id, every quantity >= 1, in the order
    products were first added.
    """
    items: List[CartItem] = field(default_factory=list)
    currency: str = DEFAULT_CURRENCY

    @classmethod
    def create(cls, currency: str = DEFAULT_CURRENCY) -> 'Cart':
        """Create a new empty cart."""
        return cls(currency=currency)

    def add_item(self, product: Product, quantity: int = 1) -> CartItem:
        """Add a product or increase its quantity if already present."""
        if quantity < 1:
            raise InvalidQuantityError(quantity)
        if product.available_qty == 0:
            raise OutOfStockError(product.id, requested=quantity)

        existing = self._find_item(product.id)
        if existing:
            existing.quantity += quantity
            existing.touch()
            item = existing
        else:
            item = CartItem(
                product_id=product.id,
                product_name=product.name,
                unit_price_minor=product.discount_price_minor,
                base_price_minor=product.base_price_minor,
                quantity=quantity,
                description=product.description,
                image_url=product.primary_image,
                currency=self.currency,
            )
            self.items.append(item)
        self.touch()
        return item

    def set_quantity(self, product_id: str, quantity: int) -> None:
        """Overwrite the quantity of an item; anything below 1 removes it."""
        item = self._find_item(product_id)
        if item is None:
            return
        if quantity < 1:
            self.remove_item(product_id)
            return
        item.quantity = quantity
        item.touch()
        self.touch()

    def remove_item(self, product_id: str) -> None:
        """Remove an item from the cart."""
        self.items = [item for item in self.items if item.product_id != product_id]
        self.touch()

    def clear(self) -> None:
        """Clear all items from the cart."""
        self.items = []
        self.touch()

    def get_item(self, product_id: str) -> Optional[CartItem]:
        return self._find_item(product_id)

    def _find_item(self, product_id: str) -> Optional[CartItem]:
        """Find an item in the cart by product ID."""
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    @property
    def subtotal(self) -> Money:
        """Sum of unit price x quantity, recomputed on every read."""
        return Money.total((item.subtotal for item in self.items), currency=self.currency)

    @property
    def subtotal_minor(self) -> int:
        return self.subtotal.amount_minor

    @property
    def total_item_count(self) -> int:
        """Get the total number of items."""
        return sum(item.quantity for item in self.items)

    @property
    def is_empty(self) -> bool:
        """Check if the cart is empty."""
        return len(self.items) == 0

    def snapshot(self) -> CartSnapshot:
        """Freeze the current contents."""
        return CartSnapshot(
            lines=tuple(
                CartLineSnapshot(
                    product_id=item.product_id,
                    product_name=item.product_name,
                    unit_price=item.unit_price,
                    quantity=item.quantity,
                    image_url=item.image_url,
                )
                for item in self.items
            ),
            subtotal=self.subtotal,
            total_items=self.total_item_count,
        )
