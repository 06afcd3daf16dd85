"""
Delivery Order Repository

Author: TM3
Date: 2026-01-30
"""
from typing import List

from sqlalchemy.orm import Session

from unidbox.domain.order import DeliveryOrder
from unidbox.models.order import DeliveryOrder as DeliveryOrderRow


class DeliveryOrderRepository:

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[DeliveryOrder]:
        """All delivery orders, newest first"""
        rows = (
            self.db.query(DeliveryOrderRow)
            .order_by(DeliveryOrderRow.created_at.desc(), DeliveryOrderRow.id.desc())
            .all()
        )
        return [DeliveryOrder.model_validate(row) for row in rows]

    def find_by_order_id(self, order_id: int) -> List[DeliveryOrder]:
        rows = (
            self.db.query(DeliveryOrderRow)
            .filter(DeliveryOrderRow.order_id == order_id)
            .order_by(DeliveryOrderRow.id)
            .all()
        )
        return [DeliveryOrder.model_validate(row) for row in rows]

    def update_status(self, do_id: int, status: str) -> bool:
        """Returns False when no delivery order has this id"""
        updated = (
            self.db.query(DeliveryOrderRow)
            .filter(DeliveryOrderRow.id == do_id)
            .update({DeliveryOrderRow.status: status}, synchronize_session=False)
        )
        self.db.commit()
        return updated > 0
