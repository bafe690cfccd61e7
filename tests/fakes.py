"""Test doubles and builders shared by the test suite.

Repositories need no fakes: the in-memory ones are already free of I/O.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, timedelta
from decimal import Decimal

from shop.domain.model.capabilities import Perishable, Shippable, ShippableItem
from shop.domain.model.catalog import CatalogEntry
from shop.domain.model.value_objects import Money
from shop.domain.service.shipping import ShippingNotifier

TODAY = date(2024, 6, 15)


class RecordingShippingNotifier(ShippingNotifier):
    """Remembers every shipment it was asked to send."""

    def __init__(self) -> None:
        self.shipments: list[list[ShippableItem]] = []

    def ship(self, units: Sequence[ShippableItem]) -> None:
        self.shipments.append(list(units))


def cheese(quantity: int = 5, expires_in: int = 5) -> CatalogEntry:
    return CatalogEntry(
        name="Cheese",
        unit_price=Money.of("100"),
        available_quantity=quantity,
        perishable=Perishable(TODAY + timedelta(days=expires_in)),
        shippable=Shippable(Decimal("200")),
    )


def tv(quantity: int = 3) -> CatalogEntry:
    return CatalogEntry(
        name="TV",
        unit_price=Money.of("5000"),
        available_quantity=quantity,
        shippable=Shippable(Decimal("8000")),
    )


def scratch_card(quantity: int = 100) -> CatalogEntry:
    return CatalogEntry(
        name="ScratchCard", unit_price=Money.of("50"), available_quantity=quantity
    )
