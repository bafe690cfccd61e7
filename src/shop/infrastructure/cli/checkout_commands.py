"""CLI commands for checking out a cart."""

from __future__ import annotations

import click

from shop.application.checkout_cart import CheckoutCartHandler
from shop.application.dto import CartItemSpec, ReceiptDTO
from shop.domain.exceptions import DomainException
from shop.infrastructure.bootstrap import ShopContext

DEMO_CUSTOMER = "Ali"
DEMO_ITEMS = [
    CartItemSpec("Cheese", 2),
    CartItemSpec("Biscuits", 1),
    CartItemSpec("ScratchCard", 1),
]


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse 'Cheese:2,TV:1' into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductName:Quantity'."
            )
        name, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{name}'."
            )
        specs.append(CartItemSpec(product_name=name.strip(), quantity=qty))
    return specs


def _display_receipt(dto: ReceiptDTO) -> None:
    click.echo("** Checkout receipt **")
    for line in dto.lines:
        click.echo(f"{line.quantity}x {line.product_name} {line.line_total}")
    click.echo("-" * 22)
    click.echo(f"Subtotal {dto.subtotal}")
    click.echo(f"Shipping {dto.shipping_fee}")
    click.echo(f"Amount {dto.total}")
    click.echo(f"Customer balance {dto.balance}")


def _run_checkout(ctx: ShopContext, customer: str, specs: list[CartItemSpec]) -> None:
    handler = CheckoutCartHandler(
        catalog_repo=ctx.catalog_repo,
        customer_repo=ctx.customer_repo,
        shipping_notifier=ctx.shipping_notifier,
    )

    try:
        dto = handler.handle(customer_name=customer, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_receipt(dto)


@click.command("checkout")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--items", required=True, help="Items as 'Product:Qty,Product:Qty'.")
@click.pass_obj
def checkout(ctx: ShopContext, customer: str, items: str) -> None:
    """Check out a cart for a customer."""
    _run_checkout(ctx, customer, _parse_items(items))


@click.command("demo")
@click.pass_obj
def demo(ctx: ShopContext) -> None:
    """Run the sample purchase: 2 Cheese, 1 Biscuits, 1 ScratchCard for Ali."""
    _run_checkout(ctx, DEMO_CUSTOMER, DEMO_ITEMS)
