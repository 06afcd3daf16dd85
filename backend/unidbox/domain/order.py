"""
Order Domain Models

Storefront orders, their line items, delivery orders and invoices.

The storefront order lifecycle (OrderStatus) and the physical dispatch
lifecycle (DeliveryOrderStatus) are separate state machines: an order can
be `ready_to_dispatch` while its delivery order is still `generated`.

Author: TM3
Date: 2026-01-29
"""
from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import Field

from unidbox.domain.base import DomainModel

OrderStatus = Literal["placed", "processing", "ready_to_dispatch", "in_transit", "delivered", "cancelled"]
PaymentStatus = Literal["pending", "paid", "failed"]
DeliveryOrderStatus = Literal["generated", "dispatched", "in_transit", "delivered"]
InvoiceStatus = Literal["draft", "sent", "paid", "overdue", "cancelled"]


class OrderItem(DomainModel):
    """
    Order Item domain model - a line item in an order

    product_name and product_sku are a snapshot taken when the order was placed.
    Money fields are in cents.
    """

    id: int = Field(..., description="Order item ID")
    order_id: int = Field(..., description="Parent order ID")
    product_id: int = Field(..., description="Product catalog ID")
    product_name: str = Field(..., description="Product name at order time")
    product_sku: str = Field(..., description="Product SKU at order time")
    quantity: int = Field(..., description="Quantity ordered", ge=1)
    unit_price: int = Field(..., description="Price per unit in cents", ge=0)
    subtotal: int = Field(..., description="Line subtotal in cents", ge=0)
    created_at: Optional[datetime] = None


class Order(DomainModel):
    """
    Order domain model - a storefront customer order

    Money fields are in cents.
    """

    id: int = Field(..., description="Internal order ID")
    order_number: str = Field(..., description="Human readable order number, e.g. ORD-2026-0042")
    user_id: Optional[str] = Field(None, description="Owning user, if the order was placed signed in")

    # Customer contact
    customer_name: str
    customer_email: Optional[str] = None
    customer_phone: Optional[str] = None
    delivery_address: str

    status: OrderStatus = "placed"
    payment_status: PaymentStatus = "pending"

    # Amounts
    subtotal: int = Field(..., ge=0)
    delivery_fee: int = Field(0, ge=0)
    tax: int = Field(0, ge=0)
    total: int = Field(..., ge=0)

    # Delivery
    estimated_delivery_date: Optional[datetime] = None
    courier_service: Optional[str] = None
    tracking_number: Optional[str] = None
    delivery_instructions: Optional[str] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DeliveryOrder(DomainModel):
    """Dispatch record for an order"""

    id: int
    do_number: str
    order_id: int
    status: DeliveryOrderStatus = "generated"
    pdf_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class InvoiceLine(DomainModel):
    name: str
    sku: str
    quantity: int
    unit_price: int
    total: int


class Invoice(DomainModel):
    """Invoice issued to a dealer. Money fields are in cents."""

    id: int
    invoice_number: str
    order_id: Optional[int] = None
    dealer_id: Optional[str] = None
    items: List[InvoiceLine] = Field(default_factory=list)
    subtotal: int
    tax: int = 0
    discount: int = 0
    total: int
    status: InvoiceStatus = "draft"
    due_date: Optional[date] = None
    payment_terms: str = "Net 30"
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ChatTranscript(DomainModel):
    id: int
    session_id: str
    user_id: Optional[str] = None
    messages: str
    exported_to_email: Optional[str] = None
    created_at: Optional[datetime] = None
