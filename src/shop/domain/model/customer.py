"""CustomerAccount aggregate."""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.exceptions import ValidationError
from shop.domain.model.value_objects import Money


@dataclass(eq=False)
class CustomerAccount:
    """A customer with a spendable balance.

    ``debit`` is the unconditional commit step of a checkout; callers
    must check ``can_afford`` first.
    """

    name: str
    balance: Money

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Customer name is required")

    def can_afford(self, amount: Money) -> bool:
        return self.balance >= amount

    def debit(self, amount: Money) -> None:
        self.balance = self.balance - amount
