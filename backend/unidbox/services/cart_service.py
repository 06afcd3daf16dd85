"""
Cart Service - prices a dealer cart

Line prices come from the dealer catalog and the discount from the loyalty
tier of the dealer attached to the session. Users without a dealer, or
whose dealer is unknown, get no discount.

Author: TM3
Date: 2026-02-03
"""
from typing import Iterable, Optional

from unidbox.domain.cart import Cart, CartItem, CartLine
from unidbox.repositories.reference_repository import ReferenceData


def get_discount_rate(reference: ReferenceData, dealer_id: Optional[str]) -> float:
    """Loyalty tier discount for a dealer, 0.05 = 5%"""
    if dealer_id is None:
        return 0.0
    dealer = reference.get_dealer(dealer_id)
    if dealer is None:
        return 0.0
    tier = reference.get_loyalty_tier(dealer.tier)
    return tier.discount_rate if tier else 0.0


def price_cart(items: Iterable[CartItem], reference: ReferenceData, discount_rate: float = 0.0) -> Cart:
    """
    Price cart lines against the catalog

    Args:
        items: Stored cart lines
        reference: Reference data holding the catalog
        discount_rate: Tier discount applied to the subtotal

    Returns:
        Cart with priced lines, subtotal, discount and total rounded to cents
    """
    lines = []
    for item in items:
        catalog_item = reference.get_catalog_item(item.product_id)
        unit_price = catalog_item.price if catalog_item else 0.0
        lines.append(CartLine(
            id=item.id,
            product_id=item.product_id,
            sku=catalog_item.sku if catalog_item else None,
            name=catalog_item.name if catalog_item else None,
            quantity=item.quantity,
            unit_price=unit_price,
            item_total=round(unit_price * item.quantity, 2),
        ))

    subtotal = round(sum(line.item_total for line in lines), 2)
    discount = round(subtotal * discount_rate, 2)
    return Cart(
        items=lines,
        subtotal=subtotal,
        discount=discount,
        total=round(subtotal - discount, 2),
        tier_discount=round(discount_rate * 100, 2),
    )
