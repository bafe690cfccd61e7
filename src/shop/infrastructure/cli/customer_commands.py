"""CLI commands for customer accounts."""

from __future__ import annotations

import click

from shop.application.show_customer import ShowCustomerHandler
from shop.domain.exceptions import DomainException
from shop.infrastructure.bootstrap import ShopContext


@click.command("show")
@click.option("--name", required=True, help="Customer name.")
@click.pass_obj
def customer_show(ctx: ShopContext, name: str) -> None:
    """Show a customer's balance."""
    handler = ShowCustomerHandler(customer_repo=ctx.customer_repo)

    try:
        dto = handler.handle(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer: {dto.name}")
    click.echo(f"Balance:  {dto.balance}")
