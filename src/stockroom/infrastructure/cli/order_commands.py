"""CLI commands for order sessions."""

from __future__ import annotations

import click

from stockroom.application.place_order import PlaceOrderHandler
from stockroom.application.show_inventory import ShowInventoryHandler
from stockroom.domain.exceptions import DomainException
from stockroom.infrastructure.bootstrap import seeded_stockroom
from stockroom.infrastructure.cli.inventory_commands import echo_stock


def _parse_items(raw: str) -> dict[str, int]:
    """Parse 'product-a:3,product-c:1' into {product_id: units}."""
    result: dict[str, int] = {}
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        product_id = product_id.strip()
        if qty <= 0:
            raise click.BadParameter(
                f"Quantity for product '{product_id}' must be positive, got {qty}."
            )
        result[product_id] = result.get(product_id, 0) + qty
    return result


@click.command("place")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
def order_place(items: str) -> None:
    """Reserve and commit an order against the seeded warehouse."""
    specs = _parse_items(items)
    stockroom = seeded_stockroom()

    handler = PlaceOrderHandler(shop=stockroom.shop, warehouse=stockroom.warehouse)

    try:
        dto = handler.handle(specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.status.lower()}  ({dto.total_units} units)")
    click.echo()
    click.echo(f"  {'ID':<12} {'Product':<20} {'Qty':>5}")
    click.echo(f"  {'-'*39}")
    for item in dto.items:
        click.echo(f"  {item.product_id:<12} {item.product_name:<20} {item.quantity:>5}")
    click.echo()
    click.echo("Remaining stock:")
    echo_stock(ShowInventoryHandler(warehouse=stockroom.warehouse).handle())
