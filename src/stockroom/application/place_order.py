"""Application service: Place Order use case.

Opens an order session, reserves each requested unit and commits.  A
rejected reservation aborts before anything is committed, and the commit
itself deducts all units or none.
"""

from __future__ import annotations

from collections.abc import Mapping

from stockroom.application.dto import OrderDTO, OrderLineDTO
from stockroom.domain.model.order import OrderSession
from stockroom.domain.model.value_objects import Quantity
from stockroom.domain.ports import ProductLookup, StockKeeper


class PlaceOrderHandler:

    def __init__(self, shop: ProductLookup, warehouse: StockKeeper) -> None:
        self._shop = shop
        self._warehouse = warehouse

    def handle(self, items: Mapping[str, int]) -> OrderDTO:
        """Place an order for ``{product_id: units}``."""
        session = OrderSession(self._shop, self._warehouse)

        for product_id, units in items.items():
            for _ in range(Quantity(units).value):
                session.reserve(product_id)

        session.commit()
        return self._to_dto(session)

    # --- Mapping --------------------------------------------------------------

    def _to_dto(self, session: OrderSession) -> OrderDTO:
        return OrderDTO(
            status=session.status.value,
            items=[
                OrderLineDTO(
                    product_id=product_id,
                    product_name=self._shop.get(product_id).name,
                    quantity=quantity,
                )
                for product_id, quantity in session.pending.items()
            ],
            total_units=session.total_units,
        )
