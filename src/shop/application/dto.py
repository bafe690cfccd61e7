"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartItemSpec:
    """Input: what the customer asked for (product name + quantity)."""

    product_name: str
    quantity: int


@dataclass(frozen=True)
class ReceiptLineDTO:
    product_name: str
    quantity: int
    line_total: str  # formatted, e.g. "200.00"


@dataclass(frozen=True)
class ReceiptDTO:
    """Output: a completed checkout as displayed to the user."""

    customer_name: str
    lines: list[ReceiptLineDTO]
    subtotal: str
    shipping_fee: str
    total: str
    balance: str


@dataclass(frozen=True)
class CatalogEntryDTO:
    name: str
    unit_price: str
    available_quantity: int
    expiry_date: str | None  # ISO date, None when not perishable
    weight: str | None  # grams, None when not shippable
    expired: bool


@dataclass(frozen=True)
class CustomerDTO:
    name: str
    balance: str
