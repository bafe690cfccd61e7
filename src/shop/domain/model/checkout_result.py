"""The outcome of a successful checkout.

Produced once per checkout call and never stored.  Presentation layers
format it however they like.
"""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.model.catalog import CatalogEntry
from shop.domain.model.value_objects import Money


@dataclass(frozen=True)
class ReceiptLine:
    product_name: str
    quantity: int
    line_total: Money


@dataclass(frozen=True)
class CheckoutResult:
    subtotal: Money
    shipping_fee: Money
    total: Money
    balance: Money  # customer balance after the debit
    lines: tuple[ReceiptLine, ...]
    shipped_units: tuple[CatalogEntry, ...] = ()

    @property
    def shipped(self) -> bool:
        return bool(self.shipped_units)
