"""In-memory fakes for the order session's collaborators.

They implement the same abstract ports as the real catalog and
warehouse but let a test change stock behind the session's back.
"""

from __future__ import annotations

from collections.abc import Mapping

from stockroom.domain.exceptions import (
    InsufficientStockError,
    OutOfStockError,
    ProductNotFoundError,
)
from stockroom.domain.model.product import Product
from stockroom.domain.ports import ProductLookup, StockKeeper


def make_product(product_id: str = "p1", **overrides) -> Product:
    fields = dict(
        name="Kettle",
        model="K-100",
        price="49.90",
        consumption="2.2",
        release_date="2020-05-01",
    )
    fields.update(overrides)
    return Product.create(
        fields.pop("name"),
        fields.pop("model"),
        fields.pop("price"),
        fields.pop("consumption"),
        product_id=product_id,
        **fields,
    )


class FakeShop(ProductLookup):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {p.id: p for p in products or []}

    def get(self, product_id: str) -> Product:
        if product_id not in self._store:
            raise ProductNotFoundError(product_id)
        return self._store[product_id].copy()


class FakeWarehouse(StockKeeper):

    def __init__(self, stock: list[tuple[Product, int]] | None = None) -> None:
        self.products: dict[str, Product] = {}
        self.quantities: dict[str, int] = {}
        self.take_units_calls: list[dict[str, int]] = []
        for product, quantity in stock or []:
            self.products[product.id] = product
            self.quantities[product.id] = quantity

    def get(self, product_id: str) -> Product:
        if product_id not in self.products:
            raise ProductNotFoundError(product_id)
        return self.products[product_id].copy()

    def quantity_of(self, product_id: str) -> int:
        self.get(product_id)
        return self.quantities[product_id]

    def take_unit(self, product_id: str) -> Product:
        product = self.get(product_id)
        if self.quantities[product_id] == 0:
            raise OutOfStockError(product_id)
        self.quantities[product_id] -= 1
        return product

    def take_units(self, quantities: Mapping[str, int]) -> list[Product]:
        self.take_units_calls.append(dict(quantities))
        for product_id, quantity in quantities.items():
            if quantity > self.quantity_of(product_id):
                raise InsufficientStockError(
                    product_id, quantity, self.quantities[product_id]
                )
        return [
            self.take_unit(product_id)
            for product_id, quantity in quantities.items()
            for _ in range(quantity)
        ]
