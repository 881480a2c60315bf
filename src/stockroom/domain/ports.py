"""Collaborator contracts consumed by the order session.

Defined in the domain layer so the session never depends on a concrete
catalog or warehouse.  Tests substitute fakes through these interfaces.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping

from stockroom.domain.model.product import Product


class ProductLookup(ABC):

    @abstractmethod
    def get(self, product_id: str) -> Product:
        """Return a copy of the product, or raise ProductNotFoundError."""


class StockKeeper(ProductLookup):

    @abstractmethod
    def quantity_of(self, product_id: str) -> int:
        """Return units on hand, or raise ProductNotFoundError."""

    @abstractmethod
    def take_unit(self, product_id: str) -> Product:
        """Remove one unit and return a copy of the product."""

    @abstractmethod
    def take_units(self, quantities: Mapping[str, int]) -> list[Product]:
        """Remove every requested unit, or none of them."""
