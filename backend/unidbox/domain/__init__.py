"""
Domain Layer - Business Entities

This layer contains Pydantic models representing business entities.
These models enforce type safety and validation across the application.

Author: TM3
Date: 2026-01-29
"""
from unidbox.domain.product import Product
from unidbox.domain.order import Order, OrderItem, DeliveryOrder, Invoice, InvoiceLine, ChatTranscript
from unidbox.domain.chat import ChatMessage, ChatResponse, ProductRecommendation, SuggestedAction
from unidbox.domain.cart import Cart, CartItem, CartLine
from unidbox.domain.dealer import (
    AdminMetrics,
    AgentAction,
    CatalogItem,
    Category,
    Dealer,
    DealerOrder,
    LoyaltyTier,
    PredictiveCart,
    Recommendation,
)

__all__ = [
    'Product',
    'Order',
    'OrderItem',
    'DeliveryOrder',
    'Invoice',
    'InvoiceLine',
    'ChatTranscript',
    'ChatMessage',
    'ChatResponse',
    'ProductRecommendation',
    'SuggestedAction',
    'Cart',
    'CartItem',
    'CartLine',
    'AdminMetrics',
    'AgentAction',
    'CatalogItem',
    'Category',
    'Dealer',
    'DealerOrder',
    'LoyaltyTier',
    'PredictiveCart',
    'Recommendation',
]
