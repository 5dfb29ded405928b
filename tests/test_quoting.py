"""Tests for quotation totals, catalog toggles and draft finalization."""
from dataclasses import replace
from datetime import date

import pytest

from studiodesk.core.models import Client, Coupon, CoreService, Quotation, QuotationItem, ServiceItem
from studiodesk.quoting import QuotationDraft, compute_total, coupon_discount, toggle_line_item


@pytest.fixture
def clients():
    return [Client(id="1", name="Acme Corp"), Client(id="2", name="Ritu & Sandeep")]


@pytest.fixture
def plan():
    return ServiceItem(
        id="s3",
        pillar=CoreService.VIDEOGRAPHY,
        category="Event",
        plan_name="Recap Protocol",
        price=3000,
    )


def test_compute_total_sums_price_times_quantity():
    items = [
        QuotationItem("Recap Protocol", quantity=1, price=3000, type="catalog"),
        QuotationItem("Drone Aerial Coverage", quantity=1, price=2500, type="resource"),
        QuotationItem("4K Cinema Delivery", quantity=1, price=1500, type="manual"),
    ]

    assert compute_total(items) == 7000


def test_compute_total_uses_quantities_and_handles_empty_lists():
    assert compute_total([]) == 0
    assert compute_total([QuotationItem("Editing", quantity=3, price=1000)]) == 3000


def test_toggle_line_item_twice_restores_original_list():
    added = toggle_line_item([], "Traditional Package", 5200)
    assert [item.description for item in added] == ["Traditional Package"]
    assert added[0].quantity == 1
    assert added[0].type == "catalog"

    assert toggle_line_item(added, "Traditional Package", 5200) == []


def test_toggle_line_item_removes_instead_of_incrementing():
    items = [QuotationItem("Sony SII", quantity=1, price=3800, type="resource")]

    toggled = toggle_line_item(items, "Sony SII", 3800, "resource")

    assert toggled == []
    assert items == [QuotationItem("Sony SII", quantity=1, price=3800, type="resource")]


def test_toggle_line_item_rejects_unknown_type():
    with pytest.raises(ValueError):
        toggle_line_item([], "Mystery", 10, "bundle")


def test_draft_total_tracks_every_edit(plan):
    draft = QuotationDraft(client_id="1")
    draft.toggle_catalog_plan(plan)
    draft.toggle_resource("Drone Aerial Coverage", 2500)
    draft.add_manual_item("4K Cinema Delivery", 1500)
    assert draft.total == 7000

    draft.update_item(2, quantity=2)
    assert draft.total == 8500

    draft.remove_item(1)
    assert draft.total == 6000

    draft.toggle_catalog_plan(plan)
    assert draft.total == 3000


def test_draft_rejects_negative_lines():
    draft = QuotationDraft()
    with pytest.raises(ValueError):
        draft.add_manual_item("Refund", -100)


def test_finalize_snapshots_total_and_expiry(clients, plan):
    draft = QuotationDraft(client_id="1", project_type=CoreService.VIDEOGRAPHY, tier="Premium")
    draft.toggle_catalog_plan(plan)
    draft.toggle_resource("Drone Aerial Coverage", 2500)
    draft.add_manual_item("4K Cinema Delivery", 1500)

    quotation = draft.finalize(clients, status="Sent", today=date(2024, 3, 15))

    assert quotation.total_amount == 7000
    assert quotation.client_name == "Acme Corp"
    assert quotation.date == "2024-03-15"
    assert quotation.expiry_date == "2024-03-29"
    assert quotation.status == "Sent"
    assert quotation.id.startswith("QT-")

    # Later catalog price changes do not touch the saved snapshot.
    repriced = replace(plan, price=9999)
    draft.toggle_catalog_plan(plan)
    draft.toggle_catalog_plan(repriced)
    assert quotation.total_amount == 7000
    assert quotation.items[0].price == 3000


def test_finalize_requires_known_client(clients):
    draft = QuotationDraft(client_id="missing")
    draft.add_manual_item("Album", 4000)

    with pytest.raises(ValueError):
        draft.finalize(clients)


def test_finalize_rejects_unknown_status(clients):
    with pytest.raises(ValueError):
        QuotationDraft(client_id="1").finalize(clients, status="Pending")


def test_editing_keeps_id_and_marks_lines_manual(clients):
    saved = Quotation(
        id="QT-2024-881",
        client_id="1",
        client_name="Acme Corp",
        items=[QuotationItem("Recap Protocol", 1, 3000, "catalog")],
        total_amount=3000,
        status="Sent",
    )

    draft = QuotationDraft.from_quotation(saved)
    assert [item.type for item in draft.items] == ["manual"]

    draft.add_manual_item("Color Grade", 1200)
    updated = draft.finalize(clients, status="Accepted")

    assert updated.id == "QT-2024-881"
    assert updated.total_amount == 4200
    assert saved.items[0].type == "catalog"


def test_apply_ai_draft_loads_items():
    class Proposal:
        project_type = "Hybrid"
        tier = "Premium"
        items = [QuotationItem("Classic Cinematic", 1, 6850, "catalog")]

    draft = QuotationDraft()
    draft.apply_ai_draft(Proposal())

    assert draft.project_type == CoreService.HYBRID
    assert draft.tier == "Premium"
    assert draft.total == 6850


@pytest.mark.parametrize(
    "coupon, expected",
    [
        (Coupon("FLASH50", "Percentage", 50), 3500),
        (Coupon("FIRST500", "Fixed", 500), 500),
        (Coupon("HUGE", "Fixed", 10000), 7000),
    ],
)
def test_coupon_discount(coupon, expected):
    assert coupon_discount(7000, coupon) == expected
