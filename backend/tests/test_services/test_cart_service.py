"""
Unit tests for cart pricing
"""
import pytest

from unidbox.domain.cart import CartItem
from unidbox.services.cart_service import get_discount_rate, price_cart


def cart_item(item_id, product_id, quantity):
    return CartItem(id=item_id, user_id="dealer-open-id", product_id=product_id, quantity=quantity)


class TestGetDiscountRate:

    @pytest.mark.parametrize("dealer_id, expected", [
        ("dealer-003", 0.03),  # silver
        ("dealer-001", 0.05),  # gold
        ("dealer-002", 0.08),  # platinum
    ])
    def test_rate_follows_dealer_tier(self, reference_data, dealer_id, expected):
        assert get_discount_rate(reference_data, dealer_id) == expected

    def test_no_dealer_or_unknown_dealer(self, reference_data):
        assert get_discount_rate(reference_data, None) == 0.0
        assert get_discount_rate(reference_data, "dealer-999") == 0.0


class TestPriceCart:

    def test_empty_cart(self, reference_data):
        cart = price_cart([], reference_data, 0.05)

        assert cart.items == []
        assert cart.subtotal == 0
        assert cart.total == 0

    def test_prices_lines_from_catalog(self, reference_data):
        # Act
        cart = price_cart([cart_item(1, "prod-001", 2), cart_item(2, "prod-002", 4)], reference_data)

        # Assert
        first, second = cart.items
        assert first.sku == "CBL-CAT6-100"
        assert first.unit_price == 89.99
        assert first.item_total == pytest.approx(179.98)
        assert second.item_total == pytest.approx(99.96)
        assert cart.subtotal == pytest.approx(279.94)
        assert cart.discount == 0
        assert cart.total == pytest.approx(279.94)

    def test_tier_discount_applied_to_subtotal(self, reference_data):
        cart = price_cart([cart_item(1, "prod-001", 2)], reference_data, 0.05)

        assert cart.subtotal == pytest.approx(179.98)
        assert cart.discount == pytest.approx(9.00)
        assert cart.total == pytest.approx(170.98)
        assert cart.tier_discount == pytest.approx(5)

    def test_item_missing_from_catalog_is_priced_at_zero(self, reference_data):
        cart = price_cart([cart_item(1, "prod-404", 3), cart_item(2, "prod-006", 1)], reference_data)

        missing = cart.items[0]
        assert missing.sku is None
        assert missing.name is None
        assert missing.item_total == 0
        assert cart.subtotal == pytest.approx(12.99)

    def test_wire_keys(self, reference_data):
        data = price_cart([cart_item(1, "prod-001", 1)], reference_data, 0.03).model_dump(by_alias=True)

        assert {"items", "subtotal", "discount", "total", "tierDiscount"} == set(data)
        assert {"productId", "unitPrice", "itemTotal"} <= set(data["items"][0])
