"""In-memory implementation of CustomerRepository."""

from __future__ import annotations

from shop.domain.model.customer import CustomerAccount
from shop.domain.repository.customer_repository import CustomerRepository


class InMemoryCustomerRepository(CustomerRepository):

    def __init__(self, customers: list[CustomerAccount] | None = None) -> None:
        self._store: dict[str, CustomerAccount] = {}
        for customer in customers or []:
            self.save(customer)

    def get_by_name(self, name: str) -> CustomerAccount | None:
        return self._store.get(name.strip().lower())

    def save(self, customer: CustomerAccount) -> None:
        self._store[customer.name.strip().lower()] = customer
