"""Build new records from submitted form values, filling the usual defaults."""
from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from studiodesk.core.models import (
    Asset,
    Client,
    ClientType,
    CoreService,
    Freelancer,
    Invoice,
    Project,
    ProjectStatus,
)
from studiodesk.core.utils import generate_id, iso_today


def new_client(
    name: str,
    client_type: ClientType | str = ClientType.CORPORATE,
    email: str = "",
    phone: str = "",
    address: str = "",
) -> Client:
    """New clients start with zeroed revenue and project counters."""

    return Client(
        id=generate_id("CL"),
        name=name.strip() or "Unknown",
        type=client_type,
        email=email,
        phone=phone,
        address=address,
    )


def new_project(
    title: str,
    client_id: str,
    clients: Iterable[Client],
    budget: float = 0,
    project_type: CoreService | str = CoreService.PHOTOGRAPHY,
    category: str = "Wedding",
    tier: str = "Standard",
    created_by: str = "System Admin",
    today: Optional[date] = None,
) -> Project:
    """Open a project at the Inquiry stage, copying contact details from its client."""

    now = today or date.today()
    stamp = iso_today(now)
    client = next((c for c in clients if c.id == client_id), None)
    return Project(
        id=generate_id("PRJ", year=now.year),
        title=title.strip() or "Untitled Project",
        status=ProjectStatus.INQUIRY,
        creation_date=stamp,
        project_owner=created_by,
        client_id=client_id,
        client_name=client.name if client else "Unknown",
        client_type=client.type if client else ClientType.INDIVIDUAL,
        primary_contact=client.name if client else "",
        phone=client.phone if client else "",
        email=client.email if client else "",
        location=client.address if client else "",
        category=category,
        tier=tier,
        project_type=project_type,
        shoot_dates=[stamp],
        delivery_deadline=stamp,
        event_locations=client.address if client else "",
        services_included="Basic Package",
        budget=budget,
        outstanding_amount=budget,
        created_by=created_by,
        last_modified_by=created_by,
        last_modified_date=stamp,
    )


def new_invoice(client_name: str, amount: float, status: str = "Pending", today: Optional[date] = None) -> Invoice:
    return Invoice(
        id=generate_id("INV"),
        client_name=client_name,
        amount=float(amount),
        date=iso_today(today),
        status=status,
    )


def new_asset(name: str, category: str = "Camera", cost: float = 0, rental_rate: float = 0) -> Asset:
    return Asset(id=generate_id("AS"), name=name, category=category, cost=cost, rental_rate=rental_rate)


def new_freelancer(name: str, role: str = "Photographer", level: str = "Mid", rate_per_day: float = 0) -> Freelancer:
    return Freelancer(
        id=generate_id("FL"),
        name=name,
        role=role,
        level=level,
        rate_per_day=rate_per_day,
        rating=5.0,
    )
