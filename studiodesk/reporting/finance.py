"""Read-time aggregates for the finance and dashboard views."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List

from studiodesk.core.models import Client, Invoice, Project, ProjectStatus, Quotation

TAX_RESERVE_RATE = 0.15
_INACTIVE_STATUSES = {ProjectStatus.CLOSED, ProjectStatus.DELIVERED}


def finance_summary(invoices: Iterable[Invoice]) -> Dict[str, float]:
    """Total invoices per status, plus the tax reserve held against paid income."""

    totals = {"paid": 0.0, "pending": 0.0, "overdue": 0.0, "draft": 0.0}
    for invoice in invoices:
        key = invoice.status.lower()
        if key in totals:
            totals[key] += invoice.amount
    totals["tax_reserve"] = totals["paid"] * TAX_RESERVE_RATE
    return totals


def dashboard_metrics(projects: Iterable[Project], clients: Iterable[Client]) -> Dict[str, float]:
    clients = list(clients)
    return {
        "total_revenue": sum(client.total_revenue for client in clients),
        "active_projects": sum(1 for project in projects if project.status not in _INACTIVE_STATUSES),
        "client_count": len(clients),
    }


def derived_client_stats(clients: Iterable[Client], projects: Iterable[Project]) -> List[Dict[str, Any]]:
    """Compare each client's stored counters with figures derived from projects.

    Revenue is the sum of budgets of the client's non-cancelled projects.
    """

    projects = list(projects)
    rows: List[Dict[str, Any]] = []
    for client in clients:
        owned = [
            project
            for project in projects
            if project.client_id == client.id and project.status != ProjectStatus.CANCELLED
        ]
        revenue = sum(project.budget for project in owned)
        rows.append(
            {
                "client_id": client.id,
                "client_name": client.name,
                "stored_revenue": client.total_revenue,
                "derived_revenue": revenue,
                "stored_projects": client.past_projects,
                "derived_projects": len(owned),
                "consistent": revenue == client.total_revenue and len(owned) == client.past_projects,
            }
        )
    return rows


def quotation_rows(quotations: Iterable[Quotation]) -> List[Dict[str, Any]]:
    return [
        {
            "id": quotation.id,
            "client": quotation.client_name,
            "date": quotation.date,
            "expiry_date": quotation.expiry_date,
            "project_type": quotation.project_type.value,
            "tier": quotation.tier,
            "items": len(quotation.items),
            "total_amount": quotation.total_amount,
            "status": quotation.status,
        }
        for quotation in quotations
    ]


def invoice_rows(invoices: Iterable[Invoice]) -> List[Dict[str, Any]]:
    return [invoice.to_dict() for invoice in invoices]
