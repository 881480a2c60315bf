"""The warehouse: a catalog plus units on hand.

Invariants:
- every product stocked through ``add_stock`` has a quantity
- a quantity never goes below zero
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from stockroom.domain.exceptions import (
    DuplicateProductError,
    InsufficientStockError,
    OutOfStockError,
)
from stockroom.domain.model.catalog import Catalog
from stockroom.domain.model.product import Product
from stockroom.domain.model.value_objects import Quantity
from stockroom.domain.ports import StockKeeper
from stockroom.log import get_logger

logger = get_logger(__name__)


class InventoryStore(Catalog, StockKeeper):

    def __init__(self) -> None:
        super().__init__()
        self._quantities: dict[str, int] = {}

    def add_stock(self, product: Product, quantity: int = 1) -> int:
        """Stock *quantity* units of *product* and return the new level.

        An unknown product is cataloged first.  A product that is already
        cataloged keeps its stored record and is simply topped up.
        """
        units = Quantity(quantity).value

        try:
            self.add(product)
        except DuplicateProductError:
            logger.debug("Product already cataloged, topping up", product_id=product.id)

        self._quantities[product.id] = self._quantities.get(product.id, 0) + units
        logger.info(
            "Stock added",
            product_id=product.id,
            added=units,
            quantity=self._quantities[product.id],
        )
        return self._quantities[product.id]

    def quantity_of(self, product_id: str) -> int:
        # cataloged through ``add`` but never stocked counts as empty
        self._lookup(product_id)
        return self._quantities.get(product_id, 0)

    def take_unit(self, product_id: str) -> Product:
        """Remove one unit and return a value copy of the product."""
        product = self._lookup(product_id)

        if self._quantities.get(product_id, 0) == 0:
            raise OutOfStockError(product_id)

        self._quantities[product_id] -= 1
        logger.debug(
            "Unit taken", product_id=product_id, quantity=self._quantities[product_id]
        )
        return product.copy()

    def take_units(self, quantities: Mapping[str, int]) -> list[Product]:
        """Remove every requested unit, or none at all.

        Phase 1 validates every product and its stock level before any
        mutation; phase 2 applies the deductions one unit at a time.
        """
        # Phase 1: validate
        plan: list[tuple[str, int]] = []
        for product_id, quantity in quantities.items():
            units = Quantity(quantity).value
            available = self.quantity_of(product_id)
            if units > available:
                raise InsufficientStockError(product_id, units, available)
            plan.append((product_id, units))

        # Phase 2: deduct
        taken: list[Product] = []
        for product_id, units in plan:
            for _ in range(units):
                taken.append(self.take_unit(product_id))
        return taken

    def stock_levels(self) -> Iterator[tuple[Product, int]]:
        for product in self.list_all():
            yield product, self._quantities.get(product.id, 0)
