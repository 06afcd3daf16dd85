"""
Invoice Repository

Author: TM3
Date: 2026-01-30
"""
from typing import List

from sqlalchemy.orm import Session

from unidbox.domain.order import Invoice
from unidbox.models.order import Invoice as InvoiceRow


class InvoiceRepository:

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[Invoice]:
        """All invoices, newest first"""
        rows = (
            self.db.query(InvoiceRow)
            .order_by(InvoiceRow.created_at.desc(), InvoiceRow.id.desc())
            .all()
        )
        return [Invoice.model_validate(row) for row in rows]

    def update_status(self, invoice_id: int, status: str) -> bool:
        """Returns False when no invoice has this id"""
        updated = (
            self.db.query(InvoiceRow)
            .filter(InvoiceRow.id == invoice_id)
            .update({InvoiceRow.status: status}, synchronize_session=False)
        )
        self.db.commit()
        return updated > 0
