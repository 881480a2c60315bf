"""CLI commands for the shop catalog."""

from __future__ import annotations

import click

from stockroom.application.show_catalog import ShowCatalogHandler
from stockroom.infrastructure.bootstrap import seeded_stockroom


@click.command("list")
def catalog_list() -> None:
    """List all products on sale."""
    handler = ShowCatalogHandler(catalog=seeded_stockroom().shop)
    products = handler.handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<12} {'Name':<10} {'Model':<6} {'Price':>8} {'Energy':>8} {'Age':>10}")
    click.echo("-" * 59)
    for p in products:
        click.echo(
            f"{p.id:<12} {p.name:<10} {p.model:<6} {p.price:>8} {p.energy_cost:>8} {p.age:>10}"
        )
