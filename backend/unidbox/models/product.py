"""
Product catalog table
"""
from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from unidbox.core.database import Base


class Product(Base):
    """
    Storefront product catalog

    Rows are created by the seed collaborator; the application only reads them.
    """
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    sku = Column(String(64), nullable=False, unique=True, index=True)
    name = Column(Text, nullable=False)
    description = Column(Text)
    category = Column(String(128), index=True)

    # Minor currency units (cents)
    price = Column(Integer, nullable=False)
    stock_quantity = Column(Integer, nullable=False, default=0)

    image_url = Column(Text)
    # JSON object serialized as text
    specifications = Column(Text)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    order_items = relationship("OrderItem", back_populates="product")
