"""The shop's list of products that may be ordered.

Tracks no quantities; availability is the warehouse's concern.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from stockroom.domain.model.catalog import Catalog
from stockroom.domain.model.product import Product
from stockroom.domain.model.value_objects import Money


class SalesCatalog(Catalog):

    def list_product(self, product: Product) -> Product:
        """Put a ready-made product on sale and return a copy of it."""
        self.add(product)
        return product.copy()

    def list_new_product(
        self,
        name: str,
        model: str,
        price: str | float | int | Decimal | Money,
        consumption: str | float | int | Decimal,
        *,
        product_id: str | None = None,
        release_date: str | date | datetime | None = None,
    ) -> Product:
        """Build a product from loose fields and put it on sale.

        The id is generated when omitted and the release date defaults to
        today.
        """
        product = Product.create(
            name,
            model,
            price,
            consumption,
            product_id=product_id,
            release_date=release_date,
        )
        return self.list_product(product)
