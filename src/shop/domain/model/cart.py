"""Cart aggregate: the lines a customer intends to buy.

The cart owns its lines; the catalog entries they point to are shared
references that checkout later mutates.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from decimal import Decimal

from shop.domain.exceptions import InsufficientStockError
from shop.domain.model.catalog import CatalogEntry
from shop.domain.model.value_objects import Money, Quantity


@dataclass
class CartLine:
    entry: CatalogEntry
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.entry.unit_price * self.quantity.value


class Cart:
    """An ordered collection of cart lines.

    Adding the same entry twice creates two independent lines.  A cart is
    meant for a single checkout; once that succeeds the stock behind its
    lines has changed.
    """

    def __init__(self) -> None:
        self._lines: list[CartLine] = []

    def add(self, entry: CatalogEntry, quantity: int) -> None:
        """Append a line for *quantity* units of *entry*.

        The stock check here is a convenience only.  Checkout re-checks
        every line against the stock available at that moment.
        """
        qty = Quantity(quantity)
        if qty.value > entry.available_quantity:
            raise InsufficientStockError(entry.name)
        self._lines.append(CartLine(entry=entry, quantity=qty))

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines)

    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[CartLine]:
        return iter(self._lines)

    # --- Aggregate queries ----------------------------------------------------

    def subtotal(self) -> Money:
        result = Money.zero()
        for line in self._lines:
            result = result + line.line_total
        return result

    def shippable_units(self) -> list[CatalogEntry]:
        """One entry reference per physical unit that has to be shipped."""
        units: list[CatalogEntry] = []
        for line in self._lines:
            if line.entry.is_shippable:
                units.extend([line.entry] * line.quantity.value)
        return units

    def total_shippable_weight(self) -> Decimal:
        total = Decimal("0")
        for line in self._lines:
            if line.entry.shippable is not None:
                total += line.entry.shippable.weight * line.quantity.value
        return total
