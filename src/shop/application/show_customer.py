"""Application service: Show Customer use case (query)."""

from __future__ import annotations

from shop.application.dto import CustomerDTO
from shop.domain.exceptions import EntityNotFoundError
from shop.domain.repository.customer_repository import CustomerRepository


class ShowCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, name: str) -> CustomerDTO:
        customer = self._customer_repo.get_by_name(name)
        if customer is None:
            raise EntityNotFoundError(f"Customer not found: '{name}'")
        return CustomerDTO(name=customer.name, balance=str(customer.balance))
