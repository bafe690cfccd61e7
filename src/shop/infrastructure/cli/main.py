import click

from shop.infrastructure.bootstrap import build_context, configure_logging
from shop.infrastructure.cli.catalog_commands import catalog_list
from shop.infrastructure.cli.checkout_commands import checkout, demo
from shop.infrastructure.cli.customer_commands import customer_show


@click.group()
@click.option(
    "--log-level",
    envvar="SHOP_LOG_LEVEL",
    default="WARNING",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity.",
)
@click.option(
    "--notifier",
    envvar="SHOP_NOTIFIER",
    default="console",
    show_default=True,
    type=click.Choice(["console", "log"]),
    help="Where shipment notices go.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str, notifier: str) -> None:
    """Shop — retail checkout"""
    configure_logging(log_level)
    ctx.obj = build_context(notifier=notifier)


@cli.group()
def catalog() -> None:
    """Browse the catalog."""


@cli.group()
def customer() -> None:
    """Inspect customer accounts."""


# Register subcommands
catalog.add_command(catalog_list)
customer.add_command(customer_show)
cli.add_command(checkout)
cli.add_command(demo)
