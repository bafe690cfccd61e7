"""Application service: Checkout Cart use case.

Resolves product and customer names through the repositories, builds a
cart and hands it to the CheckoutService domain service.  This is the
only place that coordinates lookups with the checkout transaction.
"""

from __future__ import annotations

from shop.application.dto import CartItemSpec, ReceiptDTO, ReceiptLineDTO
from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.cart import Cart
from shop.domain.model.checkout_result import CheckoutResult
from shop.domain.repository.catalog_repository import CatalogRepository
from shop.domain.repository.customer_repository import CustomerRepository
from shop.domain.service.checkout_service import CheckoutService
from shop.domain.service.shipping import ShippingNotifier


class CheckoutCartHandler:

    def __init__(
        self,
        catalog_repo: CatalogRepository,
        customer_repo: CustomerRepository,
        shipping_notifier: ShippingNotifier,
        checkout_service: CheckoutService | None = None,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._customer_repo = customer_repo
        self._shipping_notifier = shipping_notifier
        self._checkout_service = checkout_service or CheckoutService()

    def handle(self, customer_name: str, item_specs: list[CartItemSpec]) -> ReceiptDTO:
        """Check out the requested items for a customer.

        Steps:
        1. Resolve the customer and each product name (fail if not found).
        2. Fill a Cart; ``Cart.add`` rejects quantities beyond current stock.
        3. Let the CheckoutService validate, charge and ship.
        4. Return a receipt DTO.
        """
        customer = self._customer_repo.get_by_name(customer_name)
        if customer is None:
            raise EntityNotFoundError(f"Customer not found: '{customer_name}'")

        cart = Cart()
        for spec in item_specs:
            entry = self._catalog_repo.get_by_name(spec.product_name)
            if entry is None:
                raise EntityNotFoundError(
                    f"Product not found: '{spec.product_name}'"
                )
            cart.add(entry, spec.quantity)

        result = self._checkout_service.checkout(
            customer, cart, self._shipping_notifier
        )

        self._customer_repo.save(customer)
        for line in cart:
            self._catalog_repo.save(line.entry)

        return self._to_dto(customer.name, result)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(customer_name: str, result: CheckoutResult) -> ReceiptDTO:
        return ReceiptDTO(
            customer_name=customer_name,
            lines=[
                ReceiptLineDTO(
                    product_name=line.product_name,
                    quantity=line.quantity,
                    line_total=str(line.line_total),
                )
                for line in result.lines
            ],
            subtotal=str(result.subtotal),
            shipping_fee=str(result.shipping_fee),
            total=str(result.total),
            balance=str(result.balance),
        )
