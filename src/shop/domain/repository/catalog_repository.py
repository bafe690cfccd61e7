"""Abstract repository for the CatalogEntry aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  The in-memory implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.catalog import CatalogEntry


class CatalogRepository(ABC):

    @abstractmethod
    def get_by_name(self, name: str) -> CatalogEntry | None:
        """Return an entry by name (case-insensitive), or None if not found."""

    @abstractmethod
    def list_all(self) -> list[CatalogEntry]:
        """Return every entry in the catalog."""

    @abstractmethod
    def save(self, entry: CatalogEntry) -> None:
        """Store a new or updated entry."""
