"""Product entity.

Products live independently of carts. A cart only holds a reference to
a product, so stock changes made by one checkout are visible to every
other cart built from the same product.

Optional capabilities are modelled as explicit facets rather than
subclasses:

- ``perishability`` is either ``Perishable(expiry_date)`` or
  ``NonPerishable()``; only the perishable arm can expire.
- ``shipping`` is a ``ShippingFacet`` (name + per-unit weight) that is
  present iff the product is physically shipped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from shop.domain.exceptions import ValidationError
from shop.domain.model.value_objects import Money, Weight


@dataclass(frozen=True)
class Perishable:
    expiry_date: date

    def is_expired(self, today: date) -> bool:
        return self.expiry_date < today


@dataclass(frozen=True)
class NonPerishable:

    def is_expired(self, today: date) -> bool:
        return False


@dataclass(frozen=True)
class ShippingFacet:
    """What the shipping service needs to know about one physical unit."""

    name: str
    weight: Weight


@dataclass(eq=False)
class Product:
    """A product in the catalog, with its current stock.

    Compared by identity: two products with the same name and price are
    still two different stock records.
    """

    name: str
    price: Money
    quantity: int
    perishability: Perishable | NonPerishable = field(default_factory=NonPerishable)
    shipping: ShippingFacet | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValidationError(
                f"Stock quantity must be an integer, got {type(self.quantity).__name__}"
            )
        if self.quantity < 0:
            raise ValidationError(f"Stock quantity cannot be negative for {self.name}")

    # --- Capabilities ---------------------------------------------------------

    def is_expired(self, today: date) -> bool:
        return self.perishability.is_expired(today)

    @property
    def is_shippable(self) -> bool:
        return self.shipping is not None

    @property
    def expiry_date(self) -> date | None:
        if isinstance(self.perishability, Perishable):
            return self.perishability.expiry_date
        return None

    # --- Mutations ------------------------------------------------------------

    def reduce_quantity(self, amount: int) -> None:
        """Take *amount* units out of stock.

        Checkout validates stock before calling this, so a failure here
        means a caller skipped validation.
        """
        if amount <= 0:
            raise ValidationError("Reduction amount must be positive")
        if amount > self.quantity:
            raise ValidationError(
                f"Cannot remove {amount} of {self.name} "
                f"(only {self.quantity} in stock)"
            )
        self.quantity -= amount

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def expirable(
        name: str,
        price: Money,
        quantity: int,
        expiry_date: date,
        weight: Weight | None = None,
    ) -> Product:
        return Product(
            name=name,
            price=price,
            quantity=quantity,
            perishability=Perishable(expiry_date),
            shipping=ShippingFacet(name, weight) if weight is not None else None,
        )

    @staticmethod
    def shippable(name: str, price: Money, quantity: int, weight: Weight) -> Product:
        return Product(
            name=name,
            price=price,
            quantity=quantity,
            shipping=ShippingFacet(name, weight),
        )


# ---------------------------------------------------------------------------
# Concrete product kinds sold by the shop
# ---------------------------------------------------------------------------


Amount = Money | int | str | Decimal
Kilograms = Weight | int | str | Decimal


def _money(value: Amount) -> Money:
    return value if isinstance(value, Money) else Money.of(value)


def _weight(value: Kilograms) -> Weight:
    return value if isinstance(value, Weight) else Weight.of(value)


def cheese(
    name: str, price: Amount, quantity: int, expiry_date: date, weight: Kilograms
) -> Product:
    return Product.expirable(name, _money(price), quantity, expiry_date, _weight(weight))


def biscuits(
    name: str, price: Amount, quantity: int, expiry_date: date, weight: Kilograms
) -> Product:
    return Product.expirable(name, _money(price), quantity, expiry_date, _weight(weight))


def tv(name: str, price: Amount, quantity: int, weight: Kilograms) -> Product:
    return Product.shippable(name, _money(price), quantity, _weight(weight))


def mobile_scratch_card(name: str, price: Amount, quantity: int) -> Product:
    return Product(name=name, price=_money(price), quantity=quantity)
