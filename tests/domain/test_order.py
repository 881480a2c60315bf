"""Unit tests for the OrderSession state machine."""

import pytest

from stockroom.domain.exceptions import (
    InsufficientStockError,
    ProductNotFoundError,
    ProductUnavailableInShop,
    ProductUnavailableInWarehouse,
    SessionAlreadyCommittedError,
)
from stockroom.domain.model.inventory import InventoryStore
from stockroom.domain.model.order import OrderSession, OrderStatus
from stockroom.domain.model.sales_catalog import SalesCatalog
from tests.fakes import FakeShop, FakeWarehouse, make_product


def _setup(stock: int = 3) -> tuple[SalesCatalog, InventoryStore, OrderSession]:
    shop = SalesCatalog()
    warehouse = InventoryStore()
    product = make_product("p1")
    shop.list_product(product)
    warehouse.add_stock(product, stock)
    return shop, warehouse, OrderSession(shop, warehouse)


class TestReserve:

    def test_reserve_counts_units(self):
        _, warehouse, order = _setup()
        order.reserve("p1")
        order.reserve("p1")
        assert order.pending == {"p1": 2}
        assert order.total_units == 2
        # reserving does not touch stock
        assert warehouse.quantity_of("p1") == 3

    def test_reserve_up_to_stock_then_rejected(self):
        _, warehouse, order = _setup(stock=4)

        for _ in range(warehouse.quantity_of("p1")):
            order.reserve("p1")

        with pytest.raises(InsufficientStockError, match="need 5, have 4"):
            order.reserve("p1")
        assert order.pending == {"p1": 4}

    def test_not_in_shop_rejected(self):
        shop, warehouse, order = _setup()
        warehouse.add_stock(make_product("p2"), 5)

        with pytest.raises(ProductUnavailableInShop, match="not available in this shop") as info:
            order.reserve("p2")

        assert info.value.product_id == "p2"
        assert isinstance(info.value.__cause__, ProductNotFoundError)
        assert order.pending == {}

    def test_not_in_warehouse_rejected(self):
        shop, _, order = _setup()
        order.reserve("p1")
        shop.list_product(make_product("p2"))

        with pytest.raises(
            ProductUnavailableInWarehouse, match="not available in this warehouse"
        ) as info:
            order.reserve("p2")

        assert isinstance(info.value.__cause__, ProductNotFoundError)
        assert order.pending == {"p1": 1}

    def test_cataloged_but_unstocked_rejected_as_insufficient(self):
        shop, warehouse, order = _setup()
        product = make_product("p2")
        shop.list_product(product)
        warehouse.add(product)

        with pytest.raises(InsufficientStockError):
            order.reserve("p2")
        assert order.pending == {}

    def test_pending_is_a_copy(self):
        _, _, order = _setup()
        order.reserve("p1")
        order.pending["p1"] = 99
        assert order.pending == {"p1": 1}


class TestCommit:

    def test_commit_deducts_pending(self):
        _, warehouse, order = _setup(stock=3)
        order.reserve("p1")
        order.reserve("p1")

        taken = order.commit()

        assert warehouse.quantity_of("p1") == 1
        assert len(taken) == 2
        assert order.status == OrderStatus.COMMITTED
        assert order.is_committed
        # kept as the record of what was deducted
        assert order.pending == {"p1": 2}

    def test_second_commit_rejected_without_touching_stock(self):
        _, warehouse, order = _setup(stock=3)
        order.reserve("p1")
        order.reserve("p1")
        order.commit()

        with pytest.raises(SessionAlreadyCommittedError, match="expected OPEN"):
            order.commit()
        assert warehouse.quantity_of("p1") == 1

    def test_reserve_after_commit_rejected(self):
        _, warehouse, order = _setup(stock=3)
        order.reserve("p1")
        order.commit()

        with pytest.raises(SessionAlreadyCommittedError):
            order.reserve("p1")
        assert order.pending == {"p1": 1}
        assert warehouse.quantity_of("p1") == 2

    def test_empty_commit_settles_session(self):
        _, warehouse, order = _setup()
        assert order.commit() == []
        assert order.is_committed
        assert warehouse.quantity_of("p1") == 3

    def test_two_sessions_cannot_oversell(self):
        shop, warehouse, first = _setup(stock=2)
        second = OrderSession(shop, warehouse)
        first.reserve("p1")
        first.reserve("p1")
        second.reserve("p1")

        first.commit()

        with pytest.raises(InsufficientStockError):
            second.commit()
        assert second.status == OrderStatus.OPEN
        assert warehouse.quantity_of("p1") == 0


class TestCommitAgainstFakes:

    def test_stock_depleted_after_reservation_commits_nothing(self):
        p1, p2 = make_product("p1"), make_product("p2")
        shop = FakeShop([p1, p2])
        warehouse = FakeWarehouse([(p1, 5), (p2, 2)])
        order = OrderSession(shop, warehouse)

        for _ in range(3):
            order.reserve("p1")
        order.reserve("p2")
        order.reserve("p2")

        warehouse.quantities["p2"] = 1  # someone else took a unit

        with pytest.raises(InsufficientStockError):
            order.commit()

        assert warehouse.quantities == {"p1": 5, "p2": 1}
        assert order.status == OrderStatus.OPEN
        assert order.pending == {"p1": 3, "p2": 2}

    def test_commit_hands_pending_to_warehouse_once(self):
        p1 = make_product("p1")
        warehouse = FakeWarehouse([(p1, 5)])
        order = OrderSession(FakeShop([p1]), warehouse)
        order.reserve("p1")
        order.reserve("p1")

        order.commit()

        assert warehouse.take_units_calls == [{"p1": 2}]
        assert warehouse.quantities["p1"] == 3
