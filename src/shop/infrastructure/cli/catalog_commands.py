"""CLI commands for the catalog."""

from __future__ import annotations

import click

from shop.application.show_catalog import ShowCatalogHandler
from shop.infrastructure.bootstrap import ShopContext


@click.command("list")
@click.pass_obj
def catalog_list(ctx: ShopContext) -> None:
    """List every item in the catalog."""
    entries = ShowCatalogHandler(catalog_repo=ctx.catalog_repo).handle()

    if not entries:
        click.echo("No products found.")
        return

    click.echo(f"{'Name':<15} {'Price':>10} {'Stock':>6} {'Expires':>12} {'Weight':>8}")
    click.echo("-" * 55)
    for e in entries:
        expires = e.expiry_date or "-"
        if e.expired:
            expires += "!"
        weight = f"{e.weight}g" if e.weight is not None else "-"
        click.echo(
            f"{e.name:<15} {e.unit_price:>10} {e.available_quantity:>6} {expires:>12} {weight:>8}"
        )
