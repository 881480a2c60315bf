"""Catalog — keyed registry of products.

Base for both the shop's sales catalog and the warehouse.  Every public
read returns value copies so callers can never mutate stored records by
accident; mutation goes through ``update``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from stockroom.domain.exceptions import DuplicateProductError, ProductNotFoundError
from stockroom.domain.model.product import Product
from stockroom.domain.ports import ProductLookup
from stockroom.log import get_logger

logger = get_logger(__name__)


class CatalogListing:
    """Lazy, restartable view over a catalog's products.

    Each iteration walks the catalog as it is at that moment and yields
    copies.
    """

    def __init__(self, products: dict[str, Product]) -> None:
        self._products = products

    def __iter__(self) -> Iterator[Product]:
        for product in list(self._products.values()):
            yield product.copy()

    def __len__(self) -> int:
        return len(self._products)


class Catalog(ProductLookup):

    def __init__(self) -> None:
        self._products: dict[str, Product] = {}

    def add(self, product: Product) -> None:
        if product.id in self._products:
            raise DuplicateProductError(product.id)
        # stored as a copy so the caller keeps no handle on catalog state
        self._products[product.id] = product.copy()
        logger.info("Product cataloged", catalog=self._kind, product_id=product.id)

    def get(self, product_id: str) -> Product:
        return self._lookup(product_id).copy()

    def update(self, product_id: str, fields: Mapping[str, Any] | object) -> Product:
        """Overwrite the supplied fields on the stored product.

        Fields not present in *fields* are left as they are.  Returns a
        copy of the updated product.
        """
        product = self._lookup(product_id)
        product.update_from(fields)
        logger.info("Product updated", catalog=self._kind, product_id=product_id)
        return product.copy()

    def list_all(self) -> CatalogListing:
        return CatalogListing(self._products)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._products

    def __len__(self) -> int:
        return len(self._products)

    # --- Internal helpers -----------------------------------------------------

    @property
    def _kind(self) -> str:
        return type(self).__name__

    def _lookup(self, product_id: str) -> Product:
        """Return the stored (live) product."""
        try:
            return self._products[product_id]
        except KeyError:
            raise ProductNotFoundError(product_id) from None
