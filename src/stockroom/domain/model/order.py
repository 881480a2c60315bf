"""OrderSession — reserves units against a shop and a warehouse, then commits.

A session moves OPEN -> COMMITTED exactly once.  Reservations only count
units; nothing leaves the warehouse until ``commit``.
"""

from __future__ import annotations

from enum import Enum

from stockroom.domain.exceptions import (
    DomainException,
    InsufficientStockError,
    ProductNotFoundError,
    ProductUnavailableInShop,
    ProductUnavailableInWarehouse,
    SessionAlreadyCommittedError,
)
from stockroom.domain.model.product import Product
from stockroom.domain.ports import ProductLookup, StockKeeper
from stockroom.log import get_logger

logger = get_logger(__name__)


class OrderStatus(Enum):
    OPEN = "OPEN"
    COMMITTED = "COMMITTED"


class OrderSession:
    """Accumulates pending units per product for one order.

    Invariant: a product id appears in the pending map only if it passed
    the shop, warehouse and stock checks when it was reserved.  After a
    commit the pending map is kept as the record of what was deducted.
    """

    def __init__(self, shop: ProductLookup, warehouse: StockKeeper) -> None:
        self._shop = shop
        self._warehouse = warehouse
        self._pending: dict[str, int] = {}
        self._status = OrderStatus.OPEN

    # --- State ----------------------------------------------------------------

    @property
    def status(self) -> OrderStatus:
        return self._status

    @property
    def is_committed(self) -> bool:
        return self._status == OrderStatus.COMMITTED

    @property
    def pending(self) -> dict[str, int]:
        return dict(self._pending)

    @property
    def total_units(self) -> int:
        return sum(self._pending.values())

    # --- State transitions ----------------------------------------------------

    def reserve(self, product_id: str) -> None:
        """Reserve one unit of *product_id*.

        Call it N times to reserve N units.  A rejected reservation leaves
        the pending map untouched.
        """
        self._ensure_open("reserve on")

        try:
            self._shop.get(product_id)
        except ProductNotFoundError as exc:
            logger.info("Reservation rejected", product_id=product_id, reason="shop")
            raise ProductUnavailableInShop(product_id) from exc

        try:
            self._warehouse.get(product_id)
        except ProductNotFoundError as exc:
            logger.info(
                "Reservation rejected", product_id=product_id, reason="warehouse"
            )
            raise ProductUnavailableInWarehouse(product_id) from exc

        wanted = self._pending.get(product_id, 0) + 1
        available = self._warehouse.quantity_of(product_id)
        if wanted > available:
            logger.info("Reservation rejected", product_id=product_id, reason="stock")
            raise InsufficientStockError(product_id, wanted, available)

        self._pending[product_id] = wanted
        logger.debug("Unit reserved", product_id=product_id, pending=wanted)

    def commit(self) -> list[Product]:
        """Deduct every pending unit from the warehouse.

        Either all deductions apply and the session becomes COMMITTED, or
        none do and the session stays OPEN with the error propagated.
        """
        self._ensure_open("commit")

        try:
            taken = self._warehouse.take_units(self._pending)
        except DomainException:
            logger.warning("Commit failed, nothing deducted", pending=self.pending)
            raise

        self._status = OrderStatus.COMMITTED
        logger.info(
            "Order committed", products=len(self._pending), units=self.total_units
        )
        return taken

    # --- Internal helpers -----------------------------------------------------

    def _ensure_open(self, action: str) -> None:
        if self._status != OrderStatus.OPEN:
            logger.warning("Rejected change to committed session", action=action)
            raise SessionAlreadyCommittedError(
                f"Cannot {action} order session: current status is "
                f"{self._status.value}, expected OPEN"
            )
