"""
Order related tables: orders, order items, delivery orders and invoices
"""
from sqlalchemy import Column, Integer, String, DateTime, Date, Text, JSON, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from unidbox.core.database import Base


class Order(Base):
    """
    Storefront orders

    Money columns hold minor currency units (cents).
    """
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    order_number = Column(String(64), nullable=False, unique=True, index=True)
    user_id = Column(String(64), index=True)

    # Customer contact
    customer_name = Column(Text, nullable=False)
    customer_email = Column(String(320))
    customer_phone = Column(String(32))
    delivery_address = Column(Text, nullable=False)

    # Status
    status = Column(String(50), nullable=False, default="placed", index=True)
    payment_status = Column(String(50), nullable=False, default="pending")

    # Amounts
    subtotal = Column(Integer, nullable=False)
    delivery_fee = Column(Integer, nullable=False, default=0)
    tax = Column(Integer, nullable=False, default=0)
    total = Column(Integer, nullable=False)

    # Delivery
    estimated_delivery_date = Column(DateTime(timezone=True))
    courier_service = Column(String(128))
    tracking_number = Column(String(128))
    delivery_instructions = Column(Text)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    items = relationship("OrderItem", back_populates="order", cascade="all, delete-orphan")
    delivery_orders = relationship("DeliveryOrder", back_populates="order", cascade="all, delete-orphan")
    invoices = relationship("Invoice", back_populates="order")


class OrderItem(Base):
    """
    Line items of an order, with a snapshot of the product at order time
    """
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), index=True, nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), index=True, nullable=False)

    # Product data at the time of sale
    product_name = Column(Text, nullable=False)
    product_sku = Column(String(64), nullable=False)

    quantity = Column(Integer, nullable=False)
    unit_price = Column(Integer, nullable=False)
    subtotal = Column(Integer, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    order = relationship("Order", back_populates="items")
    product = relationship("Product", back_populates="order_items")


class DeliveryOrder(Base):
    """
    Dispatch record tracking the physical shipment of an order
    """
    __tablename__ = "delivery_orders"

    id = Column(Integer, primary_key=True, index=True)
    do_number = Column(String(64), nullable=False, unique=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), index=True, nullable=False)
    status = Column(String(50), nullable=False, default="generated", index=True)
    pdf_url = Column(Text)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    order = relationship("Order", back_populates="delivery_orders")


class Invoice(Base):
    """
    Invoices issued to dealers
    """
    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True, index=True)
    invoice_number = Column(String(64), nullable=False, unique=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id"), index=True)
    dealer_id = Column(String(64), index=True)

    # Line snapshot: [{name, sku, quantity, unit_price, total}]
    items = Column(JSON, nullable=False, default=list)

    subtotal = Column(Integer, nullable=False)
    tax = Column(Integer, nullable=False, default=0)
    discount = Column(Integer, nullable=False, default=0)
    total = Column(Integer, nullable=False)

    status = Column(String(50), nullable=False, default="draft", index=True)
    due_date = Column(Date)
    payment_terms = Column(String(64), nullable=False, default="Net 30")
    notes = Column(Text)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    order = relationship("Order", back_populates="invoices")
