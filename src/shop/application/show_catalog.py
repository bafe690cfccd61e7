"""Application service: Show Catalog use case (query)."""

from __future__ import annotations

from datetime import date

from shop.application.dto import CatalogEntryDTO
from shop.domain.model.catalog import CatalogEntry
from shop.domain.repository.catalog_repository import CatalogRepository


class ShowCatalogHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(self, today: date | None = None) -> list[CatalogEntryDTO]:
        return [self._to_dto(entry, today) for entry in self._catalog_repo.list_all()]

    @staticmethod
    def _to_dto(entry: CatalogEntry, today: date | None) -> CatalogEntryDTO:
        return CatalogEntryDTO(
            name=entry.name,
            unit_price=str(entry.unit_price),
            available_quantity=entry.available_quantity,
            expiry_date=entry.expiry_date.isoformat() if entry.expiry_date else None,
            weight=f"{entry.weight:.0f}" if entry.weight is not None else None,
            expired=entry.is_expired(today),
        )
