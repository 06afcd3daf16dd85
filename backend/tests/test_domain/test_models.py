"""
Unit tests for domain models
"""
import pytest
from pydantic import ValidationError

from unidbox.domain.chat import ChatResponse, SuggestedAction
from unidbox.domain.dealer import Dealer, LoyaltyTier
from unidbox.domain.order import Order
from unidbox.domain.product import Product


class TestProduct:

    def test_price_display_and_stock(self):
        product = Product(id=1, sku="CT-001", name="Premium Cable Ties - 100 Pack", price=890, stock_quantity=0)

        assert product.price_display == "$8.90"
        assert product.in_stock is False

    def test_specifications_json_text(self):
        product = Product(id=1, sku="X", name="X", price=1, specifications='{"color": "White"}')

        assert product.specifications == {"color": "White"}
        assert Product(id=2, sku="Y", name="Y", price=1, specifications="").specifications is None

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            Product(id=1, sku="X", name="X", price=-1)

    def test_wire_dump_uses_camel_case(self):
        data = Product(id=1, sku="X", name="X", price=100, stock_quantity=3, image_url="/x.png").model_dump(mode="json", by_alias=True)

        assert data["stockQuantity"] == 3
        assert data["imageUrl"] == "/x.png"


class TestOrder:

    def base_fields(self, **overrides):
        fields = {
            "id": 1,
            "order_number": "ORD-2026-0042",
            "customer_name": "Sarah Tan",
            "delivery_address": "123 Orchard Road",
            "subtotal": 7870,
            "total": 8960,
        }
        fields.update(overrides)
        return fields

    def test_defaults(self):
        order = Order(**self.base_fields())

        assert order.status == "placed"
        assert order.payment_status == "pending"
        assert order.delivery_fee == 0

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            Order(**self.base_fields(status="shipped"))

    def test_accepts_camel_case_keys(self):
        order = Order.model_validate({
            "id": 1,
            "orderNumber": "ORD-2026-0043",
            "customerName": "John Lim",
            "deliveryAddress": "456 Clementi Avenue 3",
            "subtotal": 12470,
            "total": 13890,
        })

        assert order.order_number == "ORD-2026-0043"


class TestReferenceModels:

    def test_frozen(self):
        tier = LoyaltyTier(key="gold", name="Gold", min_spend=25000, benefits=("Phone support",),
                           color="#F59E0B", discount_rate=0.05)

        with pytest.raises(ValidationError):
            tier.discount_rate = 0.5

    def test_unknown_tier_rejected(self):
        with pytest.raises(ValidationError):
            Dealer(id="d", name="n", company="c", email="e", phone="p", tier="bronze", total_spend=0,
                   order_count=0, avg_order_value=0, last_order_date="2026-01-01", reorder_cycle=7,
                   avatar="NN", persona="p")


class TestChatModels:

    def test_action_variant_defaults_to_outline(self):
        assert SuggestedAction(id="action-0", label="Browse", action="browse").variant == "outline"

    def test_response_wire_keys(self):
        data = ChatResponse(message="hi").model_dump(mode="json", by_alias=True)

        assert data == {"message": "hi", "products": None, "suggestedActions": None}
