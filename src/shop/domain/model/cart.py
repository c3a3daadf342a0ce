"""Cart and its line items.

A cart is built per checkout attempt and thrown away afterwards. It
holds product references, never copies, so it always sees current stock.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from shop.domain.exceptions import InsufficientStockError
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money, Quantity

logger = logging.getLogger(__name__)


@dataclass
class CartItem:
    """A product reference paired with the requested quantity."""

    product: Product
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value


@dataclass
class Cart:
    """Ordered line items; adding the same product twice gives two lines."""

    items: list[CartItem] = field(default_factory=list)

    def add(self, product: Product, quantity: int) -> bool:
        """Append a line item if the product currently has enough stock.

        Running short is not an error here: the item is skipped and
        ``False`` is returned so the caller can warn. Checkout repeats
        the stock check authoritatively.
        """
        requested = Quantity(quantity)
        if requested.value > product.quantity:
            logger.debug("%s", InsufficientStockError.message_for(product.name))
            return False
        self.items.append(CartItem(product=product, quantity=requested))
        return True

    def is_empty(self) -> bool:
        return not self.items
