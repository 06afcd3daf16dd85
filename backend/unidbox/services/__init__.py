"""
Service Layer - chat assistant, recommendations and cart pricing
"""
from unidbox.services.chat_service import ChatService, get_chat_service, find_alternative_products
from unidbox.services.recommendation_service import RankingService, StaticAssociationRanker, get_recommendations
from unidbox.services.cart_service import get_discount_rate, price_cart

__all__ = [
    'ChatService',
    'get_chat_service',
    'find_alternative_products',
    'RankingService',
    'StaticAssociationRanker',
    'get_recommendations',
    'get_discount_rate',
    'price_cart',
]
