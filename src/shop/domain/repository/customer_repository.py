"""Abstract repository for the CustomerAccount aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.customer import CustomerAccount


class CustomerRepository(ABC):

    @abstractmethod
    def get_by_name(self, name: str) -> CustomerAccount | None:
        """Return an account by name (case-insensitive), or None if not found."""

    @abstractmethod
    def save(self, customer: CustomerAccount) -> None:
        """Store a new or updated account."""
