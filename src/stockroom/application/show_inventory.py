"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from stockroom.application.dto import StockLineDTO
from stockroom.domain.model.inventory import InventoryStore


class ShowInventoryHandler:

    def __init__(self, warehouse: InventoryStore) -> None:
        self._warehouse = warehouse

    def handle(self) -> list[StockLineDTO]:
        return [
            StockLineDTO(
                product_id=product.id,
                product_name=product.name,
                quantity=quantity,
            )
            for product, quantity in self._warehouse.stock_levels()
        ]
