"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

There is no persistence: every process starts from the sample catalog
and customers below.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal

from shop.domain.model.capabilities import Perishable, Shippable
from shop.domain.model.catalog import CatalogEntry
from shop.domain.model.customer import CustomerAccount
from shop.domain.model.value_objects import Money
from shop.domain.service.shipping import ShippingNotifier
from shop.infrastructure.memory.catalog_repository import InMemoryCatalogRepository
from shop.infrastructure.memory.customer_repository import InMemoryCustomerRepository
from shop.infrastructure.shipping.console_notifier import (
    ConsoleShippingNotifier,
    LoggingShippingNotifier,
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class ShopContext:
    catalog_repo: InMemoryCatalogRepository
    customer_repo: InMemoryCustomerRepository
    shipping_notifier: ShippingNotifier


def sample_catalog(today: date | None = None) -> list[CatalogEntry]:
    if today is None:
        today = date.today()
    return [
        CatalogEntry(
            name="Cheese",
            unit_price=Money.of("100"),
            available_quantity=5,
            perishable=Perishable(today + timedelta(days=5)),
            shippable=Shippable(Decimal("200")),
        ),
        CatalogEntry(
            name="Biscuits",
            unit_price=Money.of("150"),
            available_quantity=2,
            perishable=Perishable(today + timedelta(days=2)),
            shippable=Shippable(Decimal("700")),
        ),
        CatalogEntry(
            name="TV",
            unit_price=Money.of("5000"),
            available_quantity=3,
            shippable=Shippable(Decimal("8000")),
        ),
        CatalogEntry(name="Mobile", unit_price=Money.of("3000"), available_quantity=10),
        CatalogEntry(name="ScratchCard", unit_price=Money.of("50"), available_quantity=100),
    ]


def sample_customers() -> list[CustomerAccount]:
    return [CustomerAccount(name="Ali", balance=Money.of("1000"))]


def shipping_notifier(kind: str = "console") -> ShippingNotifier:
    if kind == "log":
        return LoggingShippingNotifier()
    return ConsoleShippingNotifier()


def build_context(notifier: str = "console", today: date | None = None) -> ShopContext:
    return ShopContext(
        catalog_repo=InMemoryCatalogRepository(sample_catalog(today)),
        customer_repo=InMemoryCustomerRepository(sample_customers()),
        shipping_notifier=shipping_notifier(notifier),
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
