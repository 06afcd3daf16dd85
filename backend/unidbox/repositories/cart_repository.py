"""
Cart Repository - Data Access Layer for dealer carts

Every operation is scoped to the owning user, so one dealer can never
change another dealer's lines by guessing an item id.

Author: TM3
Date: 2026-02-03
"""
from typing import List

from sqlalchemy.orm import Session

from unidbox.domain.cart import CartItem
from unidbox.models.cart import CartItem as CartItemRow


class CartRepository:
    """Repository for CartItem data access"""

    def __init__(self, db: Session):
        self.db = db

    def find_by_user(self, user_id: str) -> List[CartItem]:
        """Cart lines of a user in the order they were added"""
        rows = (
            self.db.query(CartItemRow)
            .filter(CartItemRow.user_id == user_id)
            .order_by(CartItemRow.id)
            .all()
        )
        return [CartItem.model_validate(row) for row in rows]

    def add(self, user_id: str, product_id: str, quantity: int = 1) -> CartItem:
        """
        Add units of a catalog item to a user's cart

        A product already in the cart has its quantity increased instead of
        getting a second line.

        Returns:
            The resulting cart line
        """
        row = (
            self.db.query(CartItemRow)
            .filter(CartItemRow.user_id == user_id, CartItemRow.product_id == product_id)
            .first()
        )
        if row is None:
            row = CartItemRow(user_id=user_id, product_id=product_id, quantity=quantity)
            self.db.add(row)
        else:
            row.quantity = row.quantity + quantity
        self.db.commit()
        self.db.refresh(row)
        return CartItem.model_validate(row)

    def update_quantity(self, user_id: str, item_id: int, quantity: int) -> bool:
        """
        Set the quantity of a cart line; 0 removes the line

        Returns:
            False when the user has no line with this id
        """
        query = self.db.query(CartItemRow).filter(CartItemRow.id == item_id, CartItemRow.user_id == user_id)
        if quantity <= 0:
            changed = query.delete(synchronize_session=False)
        else:
            changed = query.update({CartItemRow.quantity: quantity}, synchronize_session=False)
        self.db.commit()
        return changed > 0

    def remove(self, user_id: str, item_id: int) -> bool:
        removed = (
            self.db.query(CartItemRow)
            .filter(CartItemRow.id == item_id, CartItemRow.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return removed > 0

    def clear(self, user_id: str) -> int:
        """Remove every line of a user's cart; returns the number removed"""
        removed = (
            self.db.query(CartItemRow)
            .filter(CartItemRow.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return removed
