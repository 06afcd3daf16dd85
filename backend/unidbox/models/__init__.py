"""
Database models
"""
from .product import Product
from .order import Order, OrderItem, DeliveryOrder, Invoice
from .chat import ChatTranscript
from .cart import CartItem

__all__ = [
    "Product",
    "Order",
    "OrderItem",
    "DeliveryOrder",
    "Invoice",
    "ChatTranscript",
    "CartItem",
]
