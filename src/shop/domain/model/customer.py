"""Customer entity: a name and a spendable balance."""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.model.value_objects import Money


@dataclass
class Customer:
    """Balance persists across checkouts for as long as the object lives."""

    name: str
    balance: Money

    def has_sufficient_balance(self, amount: Money) -> bool:
        return self.balance >= amount

    def pay(self, amount: Money) -> None:
        """Debit *amount*. Affordability must already have been checked."""
        self.balance = self.balance - amount
