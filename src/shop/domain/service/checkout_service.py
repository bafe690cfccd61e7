"""Domain service: Checkout.

Coordinates the cross-aggregate checkout transaction: cart, catalog
entries, customer account and shipping notifier.

Validation is read-only and runs completely before anything is mutated
(validate-then-mutate), so a rejected checkout leaves stock and balance
exactly as they were.  There is no rollback log; none is needed as long
as that ordering holds.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import date

from shop.domain.exceptions import (
    CheckoutRejected,
    EmptyCartError,
    ExpiredProductError,
    InsufficientBalanceError,
    OutOfStockError,
)
from shop.domain.model.cart import Cart
from shop.domain.model.checkout_result import CheckoutResult, ReceiptLine
from shop.domain.model.customer import CustomerAccount
from shop.domain.model.value_objects import Money
from shop.domain.service.shipping import ShippingNotifier

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
SHIPPING_FEE = Money.of("30")

# Stock and balances are plain shared objects, so checkouts are serialized
# process-wide.
_CHECKOUT_LOCK = threading.Lock()


class CheckoutService:

    def __init__(self, clock: Callable[[], date] = date.today) -> None:
        self._clock = clock

    def checkout(
        self,
        customer: CustomerAccount,
        cart: Cart,
        shipping_notifier: ShippingNotifier,
    ) -> CheckoutResult:
        """Validate, price, charge and fulfil *cart* for *customer*.

        Phase 1, validate (no mutation):
          1. the cart has lines
          2. every line, in cart order: enough stock, then not expired
          3. price the cart and add the flat shipping fee if anything ships
          4. the customer can afford the total
        Phase 2, commit: debit the customer, reduce stock line by line.
        Finally the shippable units are handed to *shipping_notifier*.
        """
        with _CHECKOUT_LOCK:
            try:
                result = self._checkout_locked(customer, cart)
            except CheckoutRejected as exc:
                logger.info("Checkout rejected for %s: %s", customer.name, exc)
                raise

        if result.shipped:
            shipping_notifier.ship(list(result.shipped_units))

        logger.info(
            "Checkout completed for %s: total %s, balance %s",
            customer.name, result.total, result.balance,
        )
        return result

    def _checkout_locked(self, customer: CustomerAccount, cart: Cart) -> CheckoutResult:
        # Phase 1: validate
        if cart.is_empty():
            raise EmptyCartError()

        today = self._clock()
        # Duplicate lines draw on the same stock counter.
        demanded: dict[int, int] = {}
        for line in cart:
            entry = line.entry
            key = id(entry)
            demanded[key] = demanded.get(key, 0) + line.quantity.value
            if demanded[key] > entry.available_quantity:
                raise OutOfStockError(entry.name)
            if entry.is_expired(today):
                raise ExpiredProductError(entry.name)

        subtotal = cart.subtotal()
        units = tuple(cart.shippable_units())
        shipping_fee = SHIPPING_FEE if units else Money.zero()
        total = subtotal + shipping_fee

        if not customer.can_afford(total):
            raise InsufficientBalanceError(required=total, available=customer.balance)

        # Phase 2: commit
        customer.debit(total)
        for line in cart:
            line.entry.reduce_quantity(line.quantity.value)

        return CheckoutResult(
            subtotal=subtotal,
            shipping_fee=shipping_fee,
            total=total,
            balance=customer.balance,
            lines=tuple(
                ReceiptLine(
                    product_name=line.entry.name,
                    quantity=line.quantity.value,
                    line_total=line.line_total,
                )
                for line in cart
            ),
            shipped_units=units,
        )
