"""Editable quotation drafts and their conversion into saved quotations."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Iterable, List, Optional

from studiodesk.core.models import (
    QUOTATION_STATUSES,
    Client,
    CoreService,
    Quotation,
    QuotationItem,
    ServiceItem,
)
from studiodesk.core.utils import generate_id, iso_offset, iso_today
from studiodesk.quoting.totals import compute_total, toggle_line_item

logger = logging.getLogger(__name__)

QUOTE_VALIDITY_DAYS = 14


@dataclass
class QuotationDraft:
    """The in-progress state of the quotation builder.

    Line items can come from the service catalog, from equipment/freelancer
    resources, or be typed in by hand. The total is recomputed on every
    access.
    """

    client_id: str = ""
    start_date: str = field(default_factory=iso_today)
    end_date: str = field(default_factory=iso_today)
    project_type: CoreService = CoreService.PHOTOGRAPHY
    tier: str = "Standard"
    items: List[QuotationItem] = field(default_factory=list)
    editing_id: Optional[str] = None

    @property
    def total(self) -> float:
        return compute_total(self.items)

    @classmethod
    def from_quotation(cls, quotation: Quotation) -> "QuotationDraft":
        """Open a saved quotation for editing; its lines become manual entries."""

        return cls(
            client_id=quotation.client_id,
            start_date=quotation.start_date,
            end_date=quotation.end_date,
            project_type=quotation.project_type,
            tier=quotation.tier,
            items=[replace(item, type="manual") for item in quotation.items],
            editing_id=quotation.id,
        )

    def toggle_catalog_plan(self, plan: ServiceItem) -> None:
        self.items = toggle_line_item(self.items, plan.plan_name, plan.price, "catalog")

    def toggle_resource(self, name: str, price: float) -> None:
        self.items = toggle_line_item(self.items, name, price, "resource")

    def add_manual_item(self, description: str, price: float, quantity: float = 1) -> None:
        if price < 0 or quantity < 0:
            raise ValueError("Line item price and quantity must be non-negative")
        self.items = self.items + [
            QuotationItem(description=description, quantity=quantity, price=price, type="manual")
        ]

    def update_item(self, index: int, **changes: Any) -> None:
        """Replace fields on one line; out-of-range indexes are ignored."""

        if not 0 <= index < len(self.items):
            return
        updated = replace(self.items[index], **changes)
        if updated.price < 0 or updated.quantity < 0:
            raise ValueError("Line item price and quantity must be non-negative")
        self.items = self.items[:index] + [updated] + self.items[index + 1 :]

    def remove_item(self, index: int) -> None:
        if 0 <= index < len(self.items):
            self.items = self.items[:index] + self.items[index + 1 :]

    def apply_ai_draft(self, ai_draft: Any) -> None:
        """Load the project type, tier and lines proposed by the assistant."""

        try:
            self.project_type = CoreService(ai_draft.project_type)
        except ValueError:
            logger.warning("Ignoring unknown project type from AI draft: %s", ai_draft.project_type)
        if ai_draft.tier in {"Standard", "Premium"}:
            self.tier = ai_draft.tier
        self.items = list(ai_draft.items)

    def finalize(
        self,
        clients: Iterable[Client],
        status: str = "Draft",
        today: Optional[date] = None,
    ) -> Quotation:
        """Freeze the draft into a :class:`Quotation` with a total snapshot."""

        if status not in QUOTATION_STATUSES:
            raise ValueError(f"Unknown quotation status: {status}")

        client = next((c for c in clients if c.id == self.client_id), None)
        if client is None:
            raise ValueError("Select a client before saving the quotation")

        quotation = Quotation(
            id=self.editing_id or generate_id("QT"),
            client_id=client.id,
            client_name=client.name,
            date=iso_today(today),
            start_date=self.start_date,
            end_date=self.end_date,
            expiry_date=iso_offset(QUOTE_VALIDITY_DAYS, today),
            project_type=self.project_type,
            tier=self.tier,
            items=[replace(item) for item in self.items],
            total_amount=self.total,
            status=status,
        )
        logger.info("Finalized quotation %s for %s: %s", quotation.id, client.name, quotation.total_amount)
        return quotation
