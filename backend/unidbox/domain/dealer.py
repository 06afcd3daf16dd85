"""
Dealer portal reference records

Dealers, the dealer catalog, dealer order history, loyalty tiers, the
predictive cart and admin console figures. These are static records
served by the reference data repository; none of them are persisted.

Author: TM3
Date: 2026-01-30
"""
from typing import Literal, Optional, Tuple

from pydantic import Field

from unidbox.domain.base import ReferenceModel

DealerTier = Literal["silver", "gold", "platinum"]
DealerOrderStatus = Literal["pending", "confirmed", "processing", "shipped", "delivered", "cancelled"]
AgentType = Literal["reorder", "upsell", "loyalty", "monitoring", "content"]
AgentActionStatus = Literal["success", "pending", "failed"]


class Category(ReferenceModel):
    id: str
    name: str
    icon: str


class CatalogItem(ReferenceModel):
    """
    Dealer catalog entry

    cross_sell lists the ids of items frequently bought together with
    this one; it is the association table behind recommendations.
    """

    id: str
    sku: str
    name: str
    category: str
    price: float = Field(..., description="Unit price in dollars")
    unit: str
    stock: int
    image: Optional[str] = None
    description: str = ""
    cross_sell: Tuple[str, ...] = ()
    popular_with: Tuple[str, ...] = ()


class Dealer(ReferenceModel):
    id: str
    name: str
    company: str
    email: str
    phone: str
    tier: DealerTier
    total_spend: float
    order_count: int
    avg_order_value: float
    last_order_date: str
    reorder_cycle: int = Field(..., description="Usual days between orders")
    avatar: str
    persona: str


class DealerOrderLine(ReferenceModel):
    product_id: str
    quantity: int
    unit_price: float


class DealerOrder(ReferenceModel):
    """Dealer purchase history entry (dealer order lifecycle)"""

    id: str
    dealer_id: str
    items: Tuple[DealerOrderLine, ...]
    subtotal: float
    status: DealerOrderStatus
    created_at: str
    delivery_order_id: Optional[str] = None


class LoyaltyTier(ReferenceModel):
    key: DealerTier
    name: str
    min_spend: float
    benefits: Tuple[str, ...]
    color: str
    discount_rate: float = Field(..., description="Tier price discount, 0.05 = 5%")


class Prediction(ReferenceModel):
    confidence: float
    next_order_date: str
    message: str


class PredictiveCartItem(ReferenceModel):
    product_id: str
    quantity: int
    reason: str


class PredictiveCart(ReferenceModel):
    """Pre-computed suggested reorder list for a dealer"""

    dealer_id: str
    prediction: Prediction
    suggested_items: Tuple[PredictiveCartItem, ...]


class Recommendation(ReferenceModel):
    product_id: str
    reason: str
    confidence: float
    potential_revenue: float


class PeriodMetrics(ReferenceModel):
    orders: int
    revenue: float
    avg_order_value: float
    ai_recommendations_accepted: int


class AIPerformance(ReferenceModel):
    predictive_cart_accuracy: float
    recommendation_accept_rate: float
    avg_aov_increase: float


class AtRiskDealer(ReferenceModel):
    dealer_id: str
    days_since_last_order: int
    usual_cycle: int


class AdminMetrics(ReferenceModel):
    today: PeriodMetrics
    week: PeriodMetrics
    month: PeriodMetrics
    ai_performance: AIPerformance
    at_risk_dealers: Tuple[AtRiskDealer, ...]


class AgentAction(ReferenceModel):
    id: str
    agent_type: AgentType
    action: str
    target: str
    timestamp: str
    status: AgentActionStatus
