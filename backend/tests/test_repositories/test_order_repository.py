"""
Unit tests for OrderRepository
"""
from unidbox.domain.order import Order, OrderItem
from unidbox.repositories.order_repository import OrderRepository


class TestOrderRepository:

    def test_find_by_number_returns_order(self, db_session):
        # Act
        order = OrderRepository(db_session).find_by_number("ORD-2026-0042")

        # Assert
        assert isinstance(order, Order)
        assert order.order_number == "ORD-2026-0042"
        assert order.total > 0
        assert order.total == 8960
        assert order.status == "ready_to_dispatch"
        assert order.payment_status == "paid"
        assert order.courier_service == "SingPost"

    def test_find_by_number_returns_none_when_not_found(self, db_session):
        assert OrderRepository(db_session).find_by_number("ORD-9999-0000") is None

    def test_find_items_returns_line_items(self, db_session):
        # Arrange
        repo = OrderRepository(db_session)
        order = repo.find_by_number("ORD-2026-0042")

        # Act
        items = repo.find_items(order.id)

        # Assert
        assert len(items) == 3
        assert all(isinstance(item, OrderItem) for item in items)
        assert [item.id for item in items] == sorted(item.id for item in items)
        first = items[0]
        assert first.product_sku == "CB-001"
        assert first.product_name == "Heavy Duty Cable Box - Large"
        assert first.quantity == 2
        assert first.unit_price == 2990
        assert first.subtotal == 5980

    def test_item_subtotals_are_price_times_quantity(self, db_session):
        repo = OrderRepository(db_session)
        order = repo.find_by_number("ORD-2026-0043")

        items = repo.find_items(order.id)

        assert [item.product_sku for item in items] == ["CM-001", "PS-001", "CM-002"]
        for item in items:
            assert item.subtotal == item.unit_price * item.quantity

    def test_find_items_unknown_order_returns_empty(self, db_session):
        assert OrderRepository(db_session).find_items(99999) == []

    def test_update_status(self, db_session):
        # Arrange
        repo = OrderRepository(db_session)
        order = repo.find_by_number("ORD-2026-0043")

        # Act
        updated = repo.update_status(order.id, "in_transit")

        # Assert
        assert updated is True
        assert repo.find_by_number("ORD-2026-0043").status == "in_transit"

    def test_update_status_unknown_order(self, db_session):
        assert OrderRepository(db_session).update_status(99999, "delivered") is False
