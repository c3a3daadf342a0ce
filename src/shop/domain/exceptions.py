"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Checkout gate failures additionally carry a ``CheckoutErrorKind`` so the
application layer can hand them back as plain result values.
"""

from __future__ import annotations

from enum import Enum


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CheckoutErrorKind(Enum):
    EMPTY_CART = "EMPTY_CART"
    PRODUCT_EXPIRED = "PRODUCT_EXPIRED"
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"
    INSUFFICIENT_BALANCE = "INSUFFICIENT_BALANCE"


class CheckoutError(DomainException):
    """A checkout gate failed. Nothing has been mutated when this is raised."""

    kind: CheckoutErrorKind


class EmptyCartError(CheckoutError):
    kind = CheckoutErrorKind.EMPTY_CART

    def __init__(self) -> None:
        super().__init__("Cart is empty.")


class ExpiredProductError(CheckoutError):
    kind = CheckoutErrorKind.PRODUCT_EXPIRED

    def __init__(self, product_name: str) -> None:
        self.product_name = product_name
        super().__init__(f"Product expired: {product_name}")


class InsufficientStockError(CheckoutError):
    kind = CheckoutErrorKind.INSUFFICIENT_STOCK

    def __init__(self, product_name: str) -> None:
        self.product_name = product_name
        super().__init__(self.message_for(product_name))

    @staticmethod
    def message_for(product_name: str) -> str:
        return f"Not enough stock for product: {product_name}"


class InsufficientBalanceError(CheckoutError):
    kind = CheckoutErrorKind.INSUFFICIENT_BALANCE

    def __init__(self) -> None:
        super().__init__("Insufficient balance.")
