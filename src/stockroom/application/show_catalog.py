"""Application service: Show Catalog use case (query)."""

from __future__ import annotations

from datetime import date

from stockroom.application.dto import ProductDTO
from stockroom.domain.model.catalog import Catalog


class ShowCatalogHandler:

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def handle(self, today: date | None = None) -> list[ProductDTO]:
        return [
            ProductDTO(
                id=product.id,
                name=product.name,
                model=product.model,
                price=str(product.cost()),
                energy_cost=f"{product.energy_cost():.2f}",
                age=product.age_label(today),
            )
            for product in self._catalog.list_all()
        ]
