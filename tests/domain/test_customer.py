"""Unit tests for the CustomerAccount aggregate."""

import pytest

from shop.domain.exceptions import ValidationError
from shop.domain.model.customer import CustomerAccount
from shop.domain.model.value_objects import Money


class TestCustomerAccount:

    def test_can_afford_exact_balance(self):
        account = CustomerAccount(name="Ali", balance=Money.of("230"))
        assert account.can_afford(Money.of("230"))

    def test_cannot_afford_more_than_balance(self):
        account = CustomerAccount(name="Ali", balance=Money.of("229.99"))
        assert not account.can_afford(Money.of("230"))

    def test_debit(self):
        account = CustomerAccount(name="Ali", balance=Money.of("1000"))
        account.debit(Money.of("230"))
        assert account.balance == Money.of("770")

    def test_fractional_balance(self):
        account = CustomerAccount(name="Ali", balance=Money.of("10.75"))
        account.debit(Money.of("0.25"))
        assert account.balance == Money.of("10.50")

    def test_debit_never_goes_negative(self):
        account = CustomerAccount(name="Ali", balance=Money.of("10"))
        with pytest.raises(ValidationError, match="negative amount"):
            account.debit(Money.of("11"))
        assert account.balance == Money.of("10")

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="Customer name is required"):
            CustomerAccount(name="", balance=Money.of("1"))
