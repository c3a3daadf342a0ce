"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from shop.domain.exceptions import ValidationError

DEFAULT_CURRENCY = "EGP"

_WHOLE = Decimal("1")
_CENTS = Decimal("0.01")


def _to_decimal(value: str | float | int | Decimal, what: str) -> Decimal:
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid {what}: {value!r}") from exc
    if not result.is_finite():
        raise ValidationError(f"Invalid {what}: {value!r}")
    return result


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal so that per-unit shipping fees (weight x rate) add up
    exactly, e.g. ``(0.2 + 0.2 + 0.7) * 30 == 33``.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        result = self.amount - other.amount
        if result < Decimal("0"):
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(result, self.currency)

    def __mul__(self, factor: int | Decimal) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, (int, Decimal)):
            raise TypeError(
                f"Can only multiply Money by int or Decimal, got {type(factor).__name__}"
            )
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    # --- Display --------------------------------------------------------------

    def whole(self) -> str:
        """Amount rounded half-up to a whole number, e.g. ``"433"``."""
        return str(self.amount.quantize(_WHOLE, rounding=ROUND_HALF_UP))

    def __str__(self) -> str:
        return f"{self.amount.quantize(_CENTS, rounding=ROUND_HALF_UP)} {self.currency}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        return Money(_to_decimal(amount, "money amount"))

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot put zero or negative items
    in a cart.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Weight:
    """Shipping weight of a single unit, in kilograms."""

    kg: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.kg, Decimal):
            raise ValidationError(
                f"Weight must be a Decimal, got {type(self.kg).__name__}"
            )
        if not self.kg.is_finite():
            raise ValidationError(f"Weight must be finite, got {self.kg}")
        if self.kg <= Decimal("0"):
            raise ValidationError(f"Weight must be positive, got {self.kg}")

    def __add__(self, other: Weight) -> Weight:
        return Weight(self.kg + other.kg)

    def __mul__(self, count: int) -> Weight:
        if isinstance(count, bool) or not isinstance(count, int):
            raise TypeError(f"Can only multiply Weight by int, got {type(count).__name__}")
        return Weight(self.kg * count)

    def grams(self) -> str:
        """Whole grams, rounded half-up, e.g. ``"400"``."""
        return str((self.kg * 1000).quantize(_WHOLE, rounding=ROUND_HALF_UP))

    def kilograms(self) -> str:
        """Kilograms with two decimals, e.g. ``"1.10"``."""
        return str(self.kg.quantize(_CENTS, rounding=ROUND_HALF_UP))

    def __str__(self) -> str:
        return f"{self.kilograms()}kg"

    @staticmethod
    def of(kg: str | float | int | Decimal) -> Weight:
        return Weight(_to_decimal(kg, "weight"))
