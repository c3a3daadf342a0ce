"""Domain service: Checkout.

Coordinates the cart, its products and the customer. Like any
cross-aggregate operation it is split in two phases:

  1. ``quote()`` validates every line and prices the cart. It fails
     fast and mutates nothing.
  2. ``commit()`` checks affordability, then decrements stock and
     debits the customer.

Every gate runs before the first mutation, so a failed checkout leaves
stock and balance exactly as they were.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from shop.domain.exceptions import (
    EmptyCartError,
    ExpiredProductError,
    InsufficientBalanceError,
    InsufficientStockError,
)
from shop.domain.model.cart import Cart
from shop.domain.model.customer import Customer
from shop.domain.model.product import ShippingFacet
from shop.domain.model.value_objects import Money
from shop.domain.service.shipping_service import ShippingService

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
SHIPPING_RATE_PER_KG = Money.of(30)


@dataclass(frozen=True)
class Quote:
    """Priced, validated cart. Holds one shipping unit per physical item."""

    subtotal: Money
    shipping: Money
    shipping_units: list[ShippingFacet]

    @property
    def total(self) -> Money:
        return self.subtotal + self.shipping


class CheckoutService:

    def __init__(self, rate_per_kg: Money = SHIPPING_RATE_PER_KG) -> None:
        self._rate_per_kg = rate_per_kg

    def quote(self, cart: Cart, today: date) -> Quote:
        """Validate the cart against current stock and *today*, then price it.

        Quantities requested for the same product on several lines are
        added up before comparing against stock.
        """
        if cart.is_empty():
            raise EmptyCartError()

        subtotal = Money.zero()
        units: list[ShippingFacet] = []
        requested: dict[int, int] = {}

        for item in cart.items:
            product = item.product
            qty = item.quantity.value

            if product.is_expired(today):
                raise ExpiredProductError(product.name)

            requested[id(product)] = requested.get(id(product), 0) + qty
            if requested[id(product)] > product.quantity:
                raise InsufficientStockError(product.name)

            subtotal = subtotal + item.line_total

            if product.shipping is not None:
                units.extend([product.shipping] * qty)

        shipping = ShippingService.shipping_cost(units, self._rate_per_kg)
        logger.debug(
            "Quoted %d line(s): subtotal=%s shipping=%s",
            len(cart.items), subtotal, shipping,
        )
        return Quote(subtotal=subtotal, shipping=shipping, shipping_units=units)

    def commit(self, customer: Customer, cart: Cart, quote: Quote) -> None:
        """Charge *customer* for *quote* and take the cart out of stock."""
        total = quote.total
        if not customer.has_sufficient_balance(total):
            raise InsufficientBalanceError()

        for item in cart.items:
            item.product.reduce_quantity(item.quantity.value)
        customer.pay(total)

        logger.info(
            "Checkout committed for %s: total=%s balance_left=%s",
            customer.name, total, customer.balance,
        )

    def process(self, customer: Customer, cart: Cart, today: date) -> Quote:
        quote = self.quote(cart, today)
        self.commit(customer, cart, quote)
        return quote

