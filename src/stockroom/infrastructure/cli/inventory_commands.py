"""CLI commands for warehouse inventory."""

from __future__ import annotations

import click

from stockroom.application.show_inventory import ShowInventoryHandler
from stockroom.infrastructure.bootstrap import seeded_stockroom


def echo_stock(lines) -> None:
    """Shared formatting for stock levels."""
    if not lines:
        click.echo("No inventory records found.")
        return

    click.echo(f"{'ID':<12} {'Product':<20} {'Quantity':>10}")
    click.echo("-" * 44)
    for line in lines:
        click.echo(f"{line.product_id:<12} {line.product_name:<20} {line.quantity:>10}")


@click.command("show")
def inventory_show() -> None:
    """Show current stock levels."""
    handler = ShowInventoryHandler(warehouse=seeded_stockroom().warehouse)
    echo_stock(handler.handle())
