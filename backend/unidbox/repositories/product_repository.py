"""
Product Repository - Data Access Layer for Products

Handles all database queries for storefront products and returns Product
domain models.

Author: TM3
Date: 2026-01-29
"""
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from unidbox.domain.product import Product
from unidbox.models.product import Product as ProductRow


def _escape_like(term: str) -> str:
    """Escape LIKE wildcards so user input matches literally"""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class ProductRepository:
    """
    Repository for Product data access

    All product queries are centralized here.
    Returns Product domain models, not ORM rows.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[Product]:
        """All products ordered by id"""
        rows = self.db.query(ProductRow).order_by(ProductRow.id).all()
        return [Product.model_validate(row) for row in rows]

    def find_by_id(self, product_id: int) -> Optional[Product]:
        """
        Find product by ID

        Args:
            product_id: Internal product ID

        Returns:
            Product or None if not found
        """
        row = self.db.query(ProductRow).filter(ProductRow.id == product_id).first()
        return Product.model_validate(row) if row else None

    def find_by_sku(self, sku: str) -> Optional[Product]:
        """
        Find product by SKU

        Args:
            sku: Product SKU

        Returns:
            Product or None if not found
        """
        row = self.db.query(ProductRow).filter(ProductRow.sku == sku).first()
        return Product.model_validate(row) if row else None

    def find_by_category(self, category: str) -> List[Product]:
        """Exact category match, ordered by id"""
        rows = (
            self.db.query(ProductRow)
            .filter(ProductRow.category == category)
            .order_by(ProductRow.id)
            .all()
        )
        return [Product.model_validate(row) for row in rows]

    def search(self, query: str) -> List[Product]:
        """
        Case-insensitive substring search over name and description

        Args:
            query: Search term, matched literally

        Returns:
            Matching products ordered by id
        """
        pattern = f"%{_escape_like(query)}%"
        rows = (
            self.db.query(ProductRow)
            .filter(or_(
                ProductRow.name.ilike(pattern, escape="\\"),
                ProductRow.description.ilike(pattern, escape="\\"),
            ))
            .order_by(ProductRow.id)
            .all()
        )
        return [Product.model_validate(row) for row in rows]
