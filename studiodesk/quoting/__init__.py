"""Quotation building: line-item totals, catalog toggles and drafts."""
from studiodesk.quoting.draft import QUOTE_VALIDITY_DAYS, QuotationDraft
from studiodesk.quoting.totals import (
    compute_total,
    coupon_discount,
    line_total,
    toggle_line_item,
)

__all__ = [
    "QUOTE_VALIDITY_DAYS",
    "QuotationDraft",
    "compute_total",
    "coupon_discount",
    "line_total",
    "toggle_line_item",
]
