import click

from stockroom.infrastructure.cli.catalog_commands import catalog_list
from stockroom.infrastructure.cli.demo_command import demo
from stockroom.infrastructure.cli.inventory_commands import inventory_show
from stockroom.infrastructure.cli.order_commands import order_place
from stockroom.infrastructure.config import ConfigError, load_settings
from stockroom.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--log-level",
    default=None,
    help="Override STOCKROOM_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR).",
)
def cli(log_level: str | None) -> None:
    """Stockroom — shop, warehouse and order sessions"""
    try:
        settings = load_settings(log_level=log_level)
    except ConfigError as exc:
        raise click.BadParameter(str(exc), param_hint="--log-level")
    configure_logging(settings)


@cli.group()
def catalog() -> None:
    """Browse the shop catalog."""


@cli.group()
def inventory() -> None:
    """Inspect warehouse stock."""


@cli.group()
def order() -> None:
    """Place orders."""


# Register subcommands
catalog.add_command(catalog_list)
inventory.add_command(inventory_show)
order.add_command(order_place)
cli.add_command(demo)
