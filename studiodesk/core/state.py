"""Application state container."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Type

from studiodesk.core.config import AgencyConfig
from studiodesk.core.models import (
    Asset,
    Client,
    Coupon,
    Freelancer,
    Invoice,
    Project,
    Quotation,
    Record,
    ServiceItem,
    SessionUser,
    SystemLog,
)

# Storage key -> record type, one persisted JSON array per key.
COLLECTION_TYPES: Dict[str, Type[Record]] = {
    "clients": Client,
    "projects": Project,
    "contractors": Freelancer,
    "assets": Asset,
    "invoices": Invoice,
    "services": ServiceItem,
    "quotations": Quotation,
    "coupons": Coupon,
    "logs": SystemLog,
}
SESSION_KEY = "auth"


@dataclass(frozen=True)
class AppState:
    """Immutable snapshot of every collection plus the signed-in user.

    Each collection is a tuple; mutations build a new state rather than
    editing records in place.
    """

    clients: Tuple[Client, ...] = ()
    projects: Tuple[Project, ...] = ()
    contractors: Tuple[Freelancer, ...] = ()
    assets: Tuple[Asset, ...] = ()
    invoices: Tuple[Invoice, ...] = ()
    services: Tuple[ServiceItem, ...] = ()
    quotations: Tuple[Quotation, ...] = ()
    coupons: Tuple[Coupon, ...] = ()
    logs: Tuple[SystemLog, ...] = ()
    session: Optional[SessionUser] = None
    agency: AgencyConfig = field(default_factory=AgencyConfig)

    def collection(self, key: str) -> Tuple[Record, ...]:
        if key not in COLLECTION_TYPES:
            raise KeyError(f"Unknown collection: {key}")
        return getattr(self, key)
