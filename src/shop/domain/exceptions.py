"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Checkout rejections share the ``CheckoutRejected`` base so callers can tell
"the order may not proceed" apart from malformed input.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


# ---------------------------------------------------------------------------
# Checkout rejections
# ---------------------------------------------------------------------------


class CheckoutRejected(DomainException):
    """Base class for every reason a checkout may not proceed."""


class EmptyCartError(CheckoutRejected):

    def __init__(self) -> None:
        super().__init__("Cart is empty")


class OutOfStockError(CheckoutRejected):
    """Requested quantity exceeds the stock available at checkout time."""

    def __init__(self, item_name: str) -> None:
        super().__init__(f"{item_name} is out of stock")
        self.item_name = item_name


class ExpiredProductError(CheckoutRejected):
    """A perishable item is past its expiry date."""

    def __init__(self, item_name: str) -> None:
        super().__init__(f"{item_name} is expired")
        self.item_name = item_name


class InsufficientBalanceError(CheckoutRejected):

    def __init__(self, required: object = None, available: object = None) -> None:
        message = "Insufficient balance"
        if required is not None and available is not None:
            message += f" (need {required}, have {available})"
        super().__init__(message)
        self.required = required
        self.available = available


class InsufficientStockError(CheckoutRejected):
    """Raised when adding more units to a cart than the catalog holds."""

    def __init__(self, item_name: str) -> None:
        super().__init__(f"Not enough stock for {item_name}")
        self.item_name = item_name
