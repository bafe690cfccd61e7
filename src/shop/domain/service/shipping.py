"""Shipping notifier port.

The checkout service hands every physical unit of a successful order to a
``ShippingNotifier``.  Concrete backends (console, log, a courier API) live
in the infrastructure layer and only have to implement ``ship``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

from shop.domain.model.capabilities import ShippableItem


class ShippingNotifier(ABC):

    @abstractmethod
    def ship(self, units: Sequence[ShippableItem]) -> None:
        """Report a shipment of *units*, one element per physical unit.

        Must do nothing when *units* is empty.
        """


@dataclass(frozen=True)
class ShipmentGroup:
    name: str
    count: int
    unit_weight: Decimal


@dataclass(frozen=True)
class ShipmentSummary:
    groups: tuple[ShipmentGroup, ...]
    total_weight: Decimal  # grams

    @property
    def total_weight_kg(self) -> Decimal:
        return self.total_weight / 1000

    @property
    def is_empty(self) -> bool:
        return not self.groups


def summarize_shipment(units: Sequence[ShippableItem]) -> ShipmentSummary:
    """Group *units* by name, in first-seen order.

    The unit weight reported for a group is the weight of the last unit
    seen with that name; the total weight sums every unit.
    """
    counts: dict[str, int] = {}
    weights: dict[str, Decimal] = {}
    total = Decimal("0")

    for unit in units:
        weight = unit.weight or Decimal("0")
        counts[unit.name] = counts.get(unit.name, 0) + 1
        weights[unit.name] = weight
        total += weight

    groups = tuple(
        ShipmentGroup(name=name, count=count, unit_weight=weights[name])
        for name, count in counts.items()
    )
    return ShipmentSummary(groups=groups, total_weight=total)
