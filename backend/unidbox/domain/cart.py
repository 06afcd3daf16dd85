"""
Dealer cart domain models

Cart lines are stored per session user and priced against the dealer
catalog when read. Amounts are dollars, like the catalog.

Author: TM3
Date: 2026-02-03
"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from unidbox.domain.base import DomainModel


class CartItem(DomainModel):
    """A stored cart line"""

    id: int = Field(..., description="Cart line ID")
    user_id: str = Field(..., description="Session open_id of the owner")
    product_id: str = Field(..., description="Dealer catalog item ID")
    quantity: int = Field(..., description="Units in the cart", ge=1)

    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")


class CartLine(DomainModel):
    """
    Priced cart line

    sku and name are None, and unit_price 0, when the catalog no longer
    carries the item.
    """

    id: int
    product_id: str
    sku: Optional[str] = None
    name: Optional[str] = None
    quantity: int
    unit_price: float
    item_total: float


class Cart(DomainModel):
    items: List[CartLine] = Field(default_factory=list)
    subtotal: float = 0.0
    discount: float = 0.0
    total: float = 0.0
    tier_discount: float = Field(0.0, description="Loyalty tier discount in percent, e.g. 5 for gold")
