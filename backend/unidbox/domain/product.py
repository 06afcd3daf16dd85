"""
Product Domain Model

Represents a storefront product.

Author: TM3
Date: 2026-01-29
"""
import json
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import Field, field_validator

from unidbox.domain.base import DomainModel


class Product(DomainModel):
    """
    Product domain model - represents a product in the storefront catalog

    Fields:
        id: Internal product ID (primary key)
        sku: Stock Keeping Unit (unique identifier)
        name: Product name
        description: Product description (optional)
        category: Product category (optional)
        price: Unit price in cents
        stock_quantity: Units available
        image_url: Product image (optional)
        specifications: Free-form key/value data (dimensions, material, ...)
    """

    id: int = Field(..., description="Internal product ID")
    sku: str = Field(..., description="Stock Keeping Unit")
    name: str = Field(..., description="Product name")
    description: Optional[str] = Field(None, description="Product description")
    category: Optional[str] = Field(None, description="Product category")

    price: int = Field(..., description="Unit price in cents", ge=0)
    stock_quantity: int = Field(0, description="Units in stock")

    image_url: Optional[str] = Field(None, description="Product image URL")
    specifications: Optional[Dict[str, Any]] = Field(None, description="Specification key/value data")

    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    @field_validator("specifications", mode="before")
    @classmethod
    def parse_specifications(cls, value):
        """The database stores specifications as JSON text"""
        if value is None or value == "":
            return None
        if isinstance(value, str):
            return json.loads(value)
        return value

    @property
    def in_stock(self) -> bool:
        return self.stock_quantity > 0

    @property
    def price_display(self) -> str:
        """Price formatted as dollars, e.g. $29.90"""
        return f"${self.price / 100:.2f}"
