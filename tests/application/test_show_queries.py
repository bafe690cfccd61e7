"""Tests for the read-only catalog and customer queries."""

from datetime import timedelta

import pytest

from shop.application.show_catalog import ShowCatalogHandler
from shop.application.show_customer import ShowCustomerHandler
from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.customer import CustomerAccount
from shop.domain.model.value_objects import Money
from shop.infrastructure.memory.catalog_repository import InMemoryCatalogRepository
from shop.infrastructure.memory.customer_repository import InMemoryCustomerRepository
from tests.fakes import TODAY, cheese, scratch_card


class TestShowCatalog:

    def test_lists_entries(self):
        repo = InMemoryCatalogRepository([cheese(), scratch_card()])

        dtos = ShowCatalogHandler(repo).handle(today=TODAY)

        assert [d.name for d in dtos] == ["Cheese", "ScratchCard"]
        assert dtos[0].unit_price == "100.00"
        assert dtos[0].expiry_date == (TODAY + timedelta(days=5)).isoformat()
        assert dtos[0].weight == "200"
        assert not dtos[0].expired
        assert dtos[1].expiry_date is None
        assert dtos[1].weight is None

    def test_flags_expired_entries(self):
        repo = InMemoryCatalogRepository([cheese(expires_in=-2)])
        assert ShowCatalogHandler(repo).handle(today=TODAY)[0].expired

    def test_empty_catalog(self):
        assert ShowCatalogHandler(InMemoryCatalogRepository()).handle() == []


class TestShowCustomer:

    def test_shows_balance(self):
        repo = InMemoryCustomerRepository([CustomerAccount("Ali", Money.of("12.5"))])
        dto = ShowCustomerHandler(repo).handle("ALI")
        assert dto.name == "Ali"
        assert dto.balance == "12.50"

    def test_unknown_customer_rejected(self):
        with pytest.raises(EntityNotFoundError, match="Customer not found"):
            ShowCustomerHandler(InMemoryCustomerRepository()).handle("Bob")
