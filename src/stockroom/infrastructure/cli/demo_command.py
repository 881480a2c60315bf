"""Walkthrough of the reserve-then-commit flow on an empty shop."""

from __future__ import annotations

import click

from stockroom.domain.exceptions import SessionAlreadyCommittedError
from stockroom.domain.model.inventory import InventoryStore
from stockroom.domain.model.order import OrderSession
from stockroom.domain.model.product import Product
from stockroom.domain.model.sales_catalog import SalesCatalog


@click.command("demo")
def demo() -> None:
    """List products, stock one, order two units and commit twice."""
    shop = SalesCatalog()
    warehouse = InventoryStore()

    a = shop.list_new_product("Product", "A", 8, 16)
    b = shop.list_new_product("Product", "B", 8, 16, product_id="test-id")
    click.echo(f"Listed {a.name} {a.model} as {a.id}")
    click.echo(f"Listed {b.name} {b.model} as {b.id}")

    product_c = Product.create(
        "Prod", "C", 9, 10, product_id="product-c", release_date="1993-01-01"
    )
    shop.list_product(product_c)
    warehouse.add_stock(product_c, 3)
    click.echo(f"Stocked {product_c.id}: {warehouse.quantity_of(product_c.id)} units")

    order = OrderSession(shop, warehouse)
    order.reserve(product_c.id)
    order.reserve(product_c.id)
    order.commit()
    click.echo(
        f"Committed {order.pending[product_c.id]} x {product_c.id}, "
        f"{warehouse.quantity_of(product_c.id)} left"
    )

    try:
        order.commit()
    except SessionAlreadyCommittedError:
        click.echo("Second commit rejected")
    else:
        raise click.ClickException("Second commit was accepted")
