"""CatalogEntry aggregate.

Catalog entries live independently of carts.  They are created up front,
shared by reference with every cart that holds them, and outlive any
single checkout.  The only mutation is stock reduction on a successful
checkout.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from shop.domain.exceptions import ValidationError
from shop.domain.model.capabilities import Perishable, Shippable
from shop.domain.model.value_objects import Money


@dataclass(eq=False)
class CatalogEntry:
    """A purchasable item.

    Invariants:
    - ``name`` is non-empty
    - ``available_quantity`` is never negative and never increases

    Entries compare by identity: two entries with the same name are still
    two distinct stock counters.
    """

    name: str
    unit_price: Money
    available_quantity: int
    perishable: Perishable | None = None
    shippable: Shippable | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if not isinstance(self.available_quantity, int) or isinstance(
            self.available_quantity, bool
        ):
            raise ValidationError(
                f"Available quantity must be an integer, "
                f"got {type(self.available_quantity).__name__}"
            )
        if self.available_quantity < 0:
            raise ValidationError(
                f"Available quantity for {self.name} cannot be negative"
            )

    # --- Capability queries ---------------------------------------------------

    @property
    def is_perishable(self) -> bool:
        return self.perishable is not None

    @property
    def expiry_date(self) -> date | None:
        return self.perishable.expiry_date if self.perishable else None

    @property
    def is_shippable(self) -> bool:
        return self.shippable is not None

    @property
    def weight(self) -> Decimal | None:
        return self.shippable.weight if self.shippable else None

    def is_expired(self, today: date | None = None) -> bool:
        if self.perishable is None:
            return False
        return self.perishable.is_expired(today)

    # --- Mutation -------------------------------------------------------------

    def reduce_quantity(self, amount: int) -> None:
        """Remove *amount* units from stock.

        Raises ValidationError rather than letting stock go negative.
        Checkout validates every line before calling this, so the error
        only surfaces on misuse.
        """
        if amount <= 0:
            raise ValidationError("Reduction amount must be positive")
        if amount > self.available_quantity:
            raise ValidationError(
                f"Cannot reduce {self.name} by {amount} "
                f"(only {self.available_quantity} available)"
            )
        self.available_quantity -= amount
