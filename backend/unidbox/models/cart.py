"""
Dealer cart lines
"""
from sqlalchemy import Column, Integer, String, DateTime, UniqueConstraint
from sqlalchemy.sql import func
from unidbox.core.database import Base


class CartItem(Base):
    """
    One line of a dealer's cart

    product_id refers to a dealer catalog item (e.g. prod-001); prices are
    taken from the catalog when the cart is read, not stored here.
    """
    __tablename__ = "cart_items"
    __table_args__ = (
        UniqueConstraint("user_id", "product_id", name="uq_cart_items_user_product"),
    )

    id = Column(Integer, primary_key=True, index=True)
    # Session open_id of the cart owner
    user_id = Column(String(64), nullable=False, index=True)
    product_id = Column(String(64), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
