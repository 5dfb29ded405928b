"""Line-item arithmetic for quotations."""
from __future__ import annotations

from typing import Iterable, List, Protocol

from studiodesk.core.models import LINE_ITEM_TYPES, Coupon, QuotationItem


class PricedLine(Protocol):
    description: str
    quantity: float
    price: float


def line_total(item: PricedLine) -> float:
    return item.price * item.quantity


def compute_total(items: Iterable[PricedLine]) -> float:
    """Sum ``price * quantity`` across the items, in order."""

    return sum((line_total(item) for item in items), 0)


def toggle_line_item(
    items: Iterable[QuotationItem], description: str, price: float, item_type: str = "catalog"
) -> List[QuotationItem]:
    """Add a quantity-1 line, or drop the existing line with the same description.

    Selecting the same entry twice therefore restores the original list.
    """

    if item_type not in LINE_ITEM_TYPES:
        raise ValueError(f"Unknown line item type: {item_type}")

    current = list(items)
    for index, item in enumerate(current):
        if item.description == description:
            return current[:index] + current[index + 1 :]
    return current + [QuotationItem(description=description, quantity=1, price=price, type=item_type)]


def coupon_discount(total: float, coupon: Coupon) -> float:
    """Return the discount a coupon grants on ``total``, never more than the total."""

    if coupon.discount_type == "Percentage":
        discount = total * coupon.value / 100
    elif coupon.discount_type == "Fixed":
        discount = coupon.value
    else:
        raise ValueError(f"Unknown coupon type: {coupon.discount_type}")
    return max(0, min(discount, total))
