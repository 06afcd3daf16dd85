"""
Order Repository - Data Access Layer for storefront orders

Author: TM3
Date: 2026-01-29
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from unidbox.domain.order import Order, OrderItem
from unidbox.models.order import Order as OrderRow, OrderItem as OrderItemRow


class OrderRepository:
    """Repository for Order and OrderItem data access"""

    def __init__(self, db: Session):
        self.db = db

    def find_by_number(self, order_number: str) -> Optional[Order]:
        """
        Find an order by its human readable number

        Args:
            order_number: e.g. ORD-2026-0042

        Returns:
            Order or None if not found
        """
        row = self.db.query(OrderRow).filter(OrderRow.order_number == order_number).first()
        return Order.model_validate(row) if row else None

    def find_items(self, order_id: int) -> List[OrderItem]:
        """Line items of an order, empty when the order does not exist"""
        rows = (
            self.db.query(OrderItemRow)
            .filter(OrderItemRow.order_id == order_id)
            .order_by(OrderItemRow.id)
            .all()
        )
        return [OrderItem.model_validate(row) for row in rows]

    def update_status(self, order_id: int, status: str) -> bool:
        """
        Set an order's status

        Returns:
            True if a row was updated, False if the order does not exist
        """
        updated = (
            self.db.query(OrderRow)
            .filter(OrderRow.id == order_id)
            .update({OrderRow.status: status}, synchronize_session=False)
        )
        self.db.commit()
        return updated > 0
