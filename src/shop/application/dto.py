"""Data Transfer Objects passed between the CLI and application layers.

Output DTOs hold amounts and weights pre-formatted exactly as they
are printed.
"""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.exceptions import CheckoutErrorKind
from shop.domain.model.cart import Cart


@dataclass(frozen=True)
class CartItemSpec:
    """Input: what the customer asked for (product name + quantity)."""

    product_name: str
    quantity: int


@dataclass(frozen=True)
class ShipmentLineDTO:
    count: int
    name: str
    grams: str  # e.g. "400"


@dataclass(frozen=True)
class ShipmentNoticeDTO:
    lines: list[ShipmentLineDTO]
    total_kg: str  # e.g. "1.10"


@dataclass(frozen=True)
class ReceiptLineDTO:
    quantity: int
    name: str
    line_total: str  # whole currency units, e.g. "200"


@dataclass(frozen=True)
class ReceiptDTO:
    """Output: everything printed after a successful checkout."""

    customer_name: str
    lines: list[ReceiptLineDTO]
    subtotal: str
    shipping: str
    total: str
    balance_left: str
    shipment: ShipmentNoticeDTO | None = None


@dataclass(frozen=True)
class CheckoutFailure:
    kind: CheckoutErrorKind
    message: str


@dataclass(frozen=True)
class CheckoutResult:
    """Either a receipt or a failure, never both."""

    receipt: ReceiptDTO | None = None
    error: CheckoutFailure | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class BuiltCart:
    """Output of cart building: the cart plus names rejected for low stock."""

    cart: Cart
    rejected: list[str]
