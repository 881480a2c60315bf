"""Composition root — builds the shop and warehouse the CLI works on.

Nothing is persisted: every invocation starts from the same seed.
"""

from __future__ import annotations

from dataclasses import dataclass

from stockroom.domain.model.inventory import InventoryStore
from stockroom.domain.model.product import Product
from stockroom.domain.model.sales_catalog import SalesCatalog

SEED_PRODUCTS = (
    # id, name, model, release date, price, consumption, units in warehouse
    ("product-a", "Product", "A", "2021-03-01", "8", "16", 5),
    ("test-id", "Product", "B", "2023-09-15", "8", "16", 0),
    ("product-c", "Prod", "C", "1993-01-01", "9", "10", 3),
)


@dataclass
class Stockroom:
    shop: SalesCatalog
    warehouse: InventoryStore


def seeded_stockroom() -> Stockroom:
    shop = SalesCatalog()
    warehouse = InventoryStore()

    for product_id, name, model, released, price, consumption, units in SEED_PRODUCTS:
        product = Product.create(
            name,
            model,
            price,
            consumption,
            product_id=product_id,
            release_date=released,
        )
        shop.list_product(product)
        if units:
            warehouse.add_stock(product, units)

    return Stockroom(shop=shop, warehouse=warehouse)
