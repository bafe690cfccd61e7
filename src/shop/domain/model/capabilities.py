"""Optional capabilities a catalog entry can carry.

Capabilities are attached to a ``CatalogEntry`` by composition rather
than expressed through subclasses, so any combination (perishable and
shippable cheese, shippable-only TV, a perishable voucher that never
ships) is just a different set of fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Protocol

from shop.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Perishable:
    """The item stops being sellable once ``expiry_date`` has passed."""

    expiry_date: date

    def is_expired(self, today: date | None = None) -> bool:
        """True iff *today* is strictly after the expiry date.

        Evaluated against the current date when *today* is omitted, so
        the answer may change over the life of the process.
        """
        if today is None:
            today = date.today()
        return today > self.expiry_date


@dataclass(frozen=True)
class Shippable:
    """The item is a physical good with a per-unit weight in grams."""

    weight: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.weight, Decimal):
            try:
                object.__setattr__(self, "weight", Decimal(str(self.weight)))
            except (InvalidOperation, ValueError) as exc:
                raise ValidationError(f"Invalid shipping weight: {self.weight!r}") from exc
        if not self.weight.is_finite() or self.weight < 0:
            raise ValidationError(
                f"Shipping weight must be a non-negative number, got {self.weight}"
            )


class ShippableItem(Protocol):
    """What a shipping backend needs to know about one unit."""

    @property
    def name(self) -> str: ...

    @property
    def weight(self) -> Decimal | None: ...
