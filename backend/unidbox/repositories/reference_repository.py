"""
Reference Data Repository - read-only dealer portal records

Built once from unidbox.data.mock_data at application start-up
(init_reference_data) and served through get_reference_data(). Every
record is a frozen pydantic model and every collection is a tuple, so the
store is safe to share between requests.

Author: TM3
Date: 2026-01-30
"""
import logging
from typing import Dict, Optional, Tuple

from unidbox.data import mock_data
from unidbox.domain.dealer import (
    AdminMetrics,
    AgentAction,
    CatalogItem,
    Category,
    Dealer,
    DealerOrder,
    LoyaltyTier,
    PredictiveCart,
)

logger = logging.getLogger(__name__)


class ReferenceData:
    """
    Repository for static dealer portal records

    Lookups return None or an empty tuple when nothing matches.
    """

    def __init__(
        self,
        categories: Tuple[Category, ...],
        catalog: Tuple[CatalogItem, ...],
        dealers: Tuple[Dealer, ...],
        dealer_orders: Tuple[DealerOrder, ...],
        predictive_carts: Tuple[PredictiveCart, ...],
        loyalty_tiers: Tuple[LoyaltyTier, ...],
        admin_metrics: AdminMetrics,
        agent_activity: Tuple[AgentAction, ...],
    ):
        self.categories = categories
        self.catalog = catalog
        self.dealers = dealers
        self.dealer_orders = dealer_orders
        self.predictive_carts = predictive_carts
        self.loyalty_tiers = loyalty_tiers
        self.admin_metrics = admin_metrics
        self.agent_activity = agent_activity

        self._catalog_by_id: Dict[str, CatalogItem] = {item.id: item for item in catalog}
        self._catalog_by_sku: Dict[str, CatalogItem] = {item.sku: item for item in catalog}
        self._dealers_by_id: Dict[str, Dealer] = {dealer.id: dealer for dealer in dealers}
        self._carts_by_dealer: Dict[str, PredictiveCart] = {cart.dealer_id: cart for cart in predictive_carts}

    @classmethod
    def from_datasets(cls) -> "ReferenceData":
        """Validate the raw datasets into frozen records"""
        return cls(
            categories=tuple(Category.model_validate(c) for c in mock_data.CATEGORIES),
            catalog=tuple(CatalogItem.model_validate(p) for p in mock_data.CATALOG),
            dealers=tuple(Dealer.model_validate(d) for d in mock_data.DEALERS),
            dealer_orders=tuple(DealerOrder.model_validate(o) for o in mock_data.DEALER_ORDERS),
            predictive_carts=tuple(PredictiveCart.model_validate(c) for c in mock_data.PREDICTIVE_CARTS),
            loyalty_tiers=tuple(LoyaltyTier.model_validate(t) for t in mock_data.LOYALTY_TIERS),
            admin_metrics=AdminMetrics.model_validate(mock_data.ADMIN_METRICS),
            agent_activity=tuple(AgentAction.model_validate(a) for a in mock_data.AGENT_ACTIVITY_LOG),
        )

    # ========================================================================
    # Lookups
    # ========================================================================

    def get_catalog_item(self, product_id: str) -> Optional[CatalogItem]:
        return self._catalog_by_id.get(product_id)

    def get_catalog_item_by_sku(self, sku: str) -> Optional[CatalogItem]:
        return self._catalog_by_sku.get(sku)

    def get_dealer(self, dealer_id: str) -> Optional[Dealer]:
        return self._dealers_by_id.get(dealer_id)

    def get_dealer_orders(self, dealer_id: str) -> Tuple[DealerOrder, ...]:
        """Order history of a dealer, newest first"""
        orders = [order for order in self.dealer_orders if order.dealer_id == dealer_id]
        # created_at is ISO 8601 UTC, so string order is chronological
        return tuple(sorted(orders, key=lambda order: order.created_at, reverse=True))

    def get_predictive_cart(self, dealer_id: str) -> Optional[PredictiveCart]:
        return self._carts_by_dealer.get(dealer_id)

    def get_loyalty_tier(self, key: str) -> Optional[LoyaltyTier]:
        for tier in self.loyalty_tiers:
            if tier.key == key:
                return tier
        return None


_reference_data: Optional[ReferenceData] = None


def init_reference_data() -> ReferenceData:
    """
    Build the reference data store

    Idempotent: later calls return the store built by the first one.
    """
    global _reference_data
    if _reference_data is None:
        _reference_data = ReferenceData.from_datasets()
        logger.info(
            f"Reference data loaded: {len(_reference_data.catalog)} catalog items, "
            f"{len(_reference_data.dealers)} dealers, {len(_reference_data.dealer_orders)} dealer orders"
        )
    return _reference_data


def get_reference_data() -> ReferenceData:
    """
    Return the reference data store

    Raises:
        RuntimeError: if init_reference_data() has not been called
    """
    if _reference_data is None:
        raise RuntimeError("Reference data not initialized; call init_reference_data() at start-up")
    return _reference_data
