"""
Unit tests for the reference data repository
"""
import pytest
from pydantic import ValidationError

from unidbox.repositories import reference_repository
from unidbox.repositories.reference_repository import ReferenceData, get_reference_data, init_reference_data


class TestReferenceData:

    def test_init_is_idempotent(self):
        assert init_reference_data() is init_reference_data()
        assert get_reference_data() is init_reference_data()

    def test_get_before_init_raises(self, monkeypatch):
        monkeypatch.setattr(reference_repository, "_reference_data", None)

        with pytest.raises(RuntimeError):
            get_reference_data()

    def test_datasets_loaded(self, reference_data):
        assert len(reference_data.catalog) == 8
        assert len(reference_data.dealers) == 4
        assert len(reference_data.dealer_orders) == 20
        assert [t.key for t in reference_data.loyalty_tiers] == ["silver", "gold", "platinum"]
        assert len(reference_data.agent_activity) == 5

    def test_records_are_immutable(self, reference_data):
        dealer = reference_data.get_dealer("dealer-001")

        with pytest.raises(ValidationError):
            dealer.tier = "platinum"

        assert isinstance(reference_data.catalog, tuple)

    def test_get_dealer(self, reference_data):
        dealer = reference_data.get_dealer("dealer-002")

        assert dealer.name == "Patricia Tan"
        assert dealer.tier == "platinum"
        assert reference_data.get_dealer("dealer-999") is None

    def test_get_dealer_orders(self, reference_data):
        orders = reference_data.get_dealer_orders("dealer-004")

        assert len(orders) == 5
        assert orders[0].id == "ORD-2026-0043"
        assert orders[0].status == "processing"
        assert orders[0].delivery_order_id is None
        assert reference_data.get_dealer_orders("dealer-999") == ()

    def test_get_predictive_cart(self, reference_data):
        cart = reference_data.get_predictive_cart("dealer-001")

        assert cart.prediction.confidence == 0.92
        assert [item.product_id for item in cart.suggested_items] == ["prod-001", "prod-002", "prod-005"]
        assert reference_data.get_predictive_cart("dealer-002") is None

    def test_get_loyalty_tier(self, reference_data):
        assert reference_data.get_loyalty_tier("gold").discount_rate == 0.05
        assert reference_data.get_loyalty_tier("bronze") is None

    def test_from_datasets_builds_new_store(self):
        store = ReferenceData.from_datasets()

        assert store is not get_reference_data()
        assert store.get_catalog_item("prod-007").name == "LED Panel Light 60x60cm"

    def test_dealer_orders_sorted_newest_first_regardless_of_dataset_order(self, reference_data):
        # Arrange
        store = ReferenceData(
            categories=reference_data.categories,
            catalog=reference_data.catalog,
            dealers=reference_data.dealers,
            dealer_orders=tuple(reversed(reference_data.dealer_orders)),
            predictive_carts=reference_data.predictive_carts,
            loyalty_tiers=reference_data.loyalty_tiers,
            admin_metrics=reference_data.admin_metrics,
            agent_activity=reference_data.agent_activity,
        )

        # Act
        orders = store.get_dealer_orders("dealer-002")

        # Assert
        assert [o.id for o in orders] == ["ORD-2026-0042", "ORD-2026-0038", "ORD-2026-0030", "ORD-2026-0022",
                                          "ORD-2025-0195"]
        dates = [o.created_at for o in orders]
        assert dates == sorted(dates, reverse=True)

    def test_get_catalog_item_by_sku(self, reference_data):
        assert reference_data.get_catalog_item_by_sku("CON-RJ45-100").id == "prod-002"
        assert reference_data.get_catalog_item_by_sku("CB-001") is None
