"""
Repository Layer - Data Access

This layer handles all database queries and returns domain models.
Repositories abstract away SQL details from business logic.

Author: TM3
Date: 2026-01-29
"""
from unidbox.repositories.product_repository import ProductRepository
from unidbox.repositories.order_repository import OrderRepository
from unidbox.repositories.invoice_repository import InvoiceRepository
from unidbox.repositories.delivery_order_repository import DeliveryOrderRepository
from unidbox.repositories.chat_transcript_repository import ChatTranscriptRepository
from unidbox.repositories.cart_repository import CartRepository
from unidbox.repositories.reference_repository import ReferenceData, init_reference_data, get_reference_data

__all__ = [
    'ProductRepository',
    'OrderRepository',
    'InvoiceRepository',
    'DeliveryOrderRepository',
    'ChatTranscriptRepository',
    'CartRepository',
    'ReferenceData',
    'init_reference_data',
    'get_reference_data',
]
