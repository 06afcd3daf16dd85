"""
Access control tests

The access gate runs before input validation.
"""
from unittest.mock import patch

import pytest

from unidbox.core.exceptions import Forbidden, ProcedureNotFound, Unauthorized
from unidbox.rpc.procedure import AccessLevel
from unidbox.rpc.routers import app_router

ADMIN_PROCEDURES = [path for path, proc in app_router.procedures.items() if proc.access == AccessLevel.ADMIN]
AUTHENTICATED_PROCEDURES = [
    path for path, proc in app_router.procedures.items() if proc.access == AccessLevel.AUTHENTICATED
]


class TestAccessControl:

    @pytest.mark.parametrize("path", ADMIN_PROCEDURES)
    def test_admin_procedures_reject_anonymous(self, anonymous_caller, path):
        with pytest.raises(Unauthorized):
            anonymous_caller.call(path, "garbage input")

    @pytest.mark.parametrize("path", ADMIN_PROCEDURES)
    def test_admin_procedures_reject_non_admin(self, dealer_caller, path):
        with pytest.raises(Forbidden):
            dealer_caller.call(path, "garbage input")

    @patch("unidbox.rpc.routers.OrderRepository")
    def test_rejected_before_collaborator(self, mock_repo, dealer_caller):
        with pytest.raises(Forbidden):
            dealer_caller.call("orders.updateStatus", {"orderId": 1, "status": "delivered"})

        assert mock_repo.call_count == 0

    def test_authenticated_procedures_reject_anonymous(self, anonymous_caller):
        with pytest.raises(Unauthorized):
            anonymous_caller.call("dealers.orders", {"dealerId": "dealer-001"})

    @pytest.mark.parametrize("path", AUTHENTICATED_PROCEDURES)
    def test_every_authenticated_procedure_rejects_anonymous(self, anonymous_caller, path):
        with pytest.raises(Unauthorized):
            anonymous_caller.call(path, "garbage input")

    def test_cart_procedures_need_a_session(self):
        assert {p for p in AUTHENTICATED_PROCEDURES if p.startswith("cart.")} == {
            "cart.get", "cart.add", "cart.updateQuantity", "cart.remove", "cart.clear",
        }

    def test_authenticated_procedures_accept_any_user(self, dealer_caller):
        orders = dealer_caller.call("dealers.orders", {"dealerId": "dealer-001"})

        assert len(orders) == 6

    def test_expected_admin_surface(self):
        assert set(ADMIN_PROCEDURES) == {
            "orders.updateStatus",
            "invoices.listAll",
            "invoices.updateStatus",
            "deliveryOrders.listAll",
            "deliveryOrders.updateStatus",
            "dealers.list",
            "dealers.get",
            "admin.metrics",
            "admin.agentActivity",
        }

    def test_unknown_procedure(self, admin_caller):
        with pytest.raises(ProcedureNotFound):
            admin_caller.call("orders.delete", 1)
