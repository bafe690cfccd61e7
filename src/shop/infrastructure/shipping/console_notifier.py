"""Shipping notifiers that report shipments locally.

``ConsoleShippingNotifier`` prints a shipment notice for the CLI;
``LoggingShippingNotifier`` writes the same summary to the log for
callers that have no terminal.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import click

from shop.domain.model.capabilities import ShippableItem
from shop.domain.service.shipping import (
    ShipmentSummary,
    ShippingNotifier,
    summarize_shipment,
)

logger = logging.getLogger(__name__)


def format_shipment(summary: ShipmentSummary) -> list[str]:
    """Render a summary as the lines of a shipment notice."""
    lines = ["** Shipment notice **"]
    for group in summary.groups:
        lines.append(f"{group.count}x {group.name} {group.unit_weight:.0f}g")
    lines.append(f"Total package weight {summary.total_weight_kg:.1f}kg")
    return lines


class ConsoleShippingNotifier(ShippingNotifier):

    def ship(self, units: Sequence[ShippableItem]) -> None:
        summary = summarize_shipment(units)
        if summary.is_empty:
            return
        for line in format_shipment(summary):
            click.echo(line)


class LoggingShippingNotifier(ShippingNotifier):

    def ship(self, units: Sequence[ShippableItem]) -> None:
        summary = summarize_shipment(units)
        if summary.is_empty:
            return
        for group in summary.groups:
            logger.info(
                "Shipping %dx %s (%sg each)", group.count, group.name, group.unit_weight
            )
        logger.info("Total package weight %sg", summary.total_weight)
