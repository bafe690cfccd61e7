"""In-memory implementation of CatalogRepository.

Entries are kept as live objects, so stock reduced by a checkout is
visible to the next lookup.
"""

from __future__ import annotations

from shop.domain.model.catalog import CatalogEntry
from shop.domain.repository.catalog_repository import CatalogRepository


class InMemoryCatalogRepository(CatalogRepository):

    def __init__(self, entries: list[CatalogEntry] | None = None) -> None:
        self._store: dict[str, CatalogEntry] = {}
        for entry in entries or []:
            self.save(entry)

    def get_by_name(self, name: str) -> CatalogEntry | None:
        return self._store.get(name.strip().lower())

    def list_all(self) -> list[CatalogEntry]:
        return list(self._store.values())

    def save(self, entry: CatalogEntry) -> None:
        self._store[entry.name.strip().lower()] = entry
