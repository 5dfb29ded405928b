"""Typed mutation actions, one per user-initiated change.

Each action names the persisted collections it can touch and the toast the
back office shows once it has been applied.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Optional, Tuple

from studiodesk.core.models import (
    Asset,
    Client,
    CoreService,
    Coupon,
    Freelancer,
    Invoice,
    Project,
    Quotation,
    ServiceItem,
    SessionUser,
)
from studiodesk.core.state import AppState

Notice = Tuple[str, str]


class Action:
    collections: ClassVar[Tuple[str, ...]] = ()
    message: ClassVar[Optional[str]] = None
    kind: ClassVar[str] = "success"

    def notice(self, state: AppState) -> Optional[Notice]:
        """Return ``(text, kind)`` for the toast, or ``None`` for silent actions."""

        if self.message is None:
            return None
        return self.message, self.kind


# Clients


@dataclass
class AddClient(Action):
    client: Client
    collections = ("clients",)
    message = "Client Profile Created"


@dataclass
class EditClient(Action):
    client: Client
    collections = ("clients",)
    message = "Profile Modified"


@dataclass
class DeleteClient(Action):
    client_id: str
    collections = ("clients",)
    message = "Client Purged"
    kind = "error"


# Projects


@dataclass
class AddProject(Action):
    project: Project
    collections = ("projects",)
    message = "Project Created"


@dataclass
class EditProject(Action):
    project: Project
    collections = ("projects",)
    message = "Project Card Updated"


@dataclass
class DeleteProject(Action):
    project_id: str
    collections = ("projects",)
    message = "Project Archive Purged"
    kind = "error"


@dataclass
class MoveProject(Action):
    project_id: str
    direction: str
    collections = ("projects",)


# Equipment


@dataclass
class AddAsset(Action):
    asset: Asset
    collections = ("assets",)
    message = "Asset Archived"


@dataclass
class ToggleAssetStatus(Action):
    asset_id: str
    collections = ("assets",)


@dataclass
class SetAssetStatus(Action):
    asset_id: str
    status: str
    collections = ("assets",)


@dataclass
class UpdateAssetOptions(Action):
    asset_id: str
    options: Dict[str, Any] = field(default_factory=dict)
    collections = ("assets",)


@dataclass
class DeleteAsset(Action):
    asset_id: str
    collections = ("assets",)
    message = "Asset Removed"
    kind = "error"


# Freelancers


@dataclass
class AddFreelancer(Action):
    freelancer: Freelancer
    collections = ("contractors",)
    message = "Specialist Onboarded"


@dataclass
class UpdateFreelancerRating(Action):
    freelancer_id: str
    rating: float
    collections = ("contractors",)


@dataclass
class SetFreelancerStatus(Action):
    freelancer_id: str
    status: str
    collections = ("contractors",)


@dataclass
class UpdateFreelancerOptions(Action):
    freelancer_id: str
    options: Dict[str, Any] = field(default_factory=dict)
    collections = ("contractors",)


@dataclass
class DeleteFreelancer(Action):
    freelancer_id: str
    collections = ("contractors",)
    message = "Contractor Removed"
    kind = "error"


# Finance


@dataclass
class AddInvoice(Action):
    invoice: Invoice
    collections = ("invoices",)
    message = "Invoice Registered"


# Service catalog


@dataclass
class AddService(Action):
    service: ServiceItem
    collections = ("services",)
    message = "Service Blueprint Saved"


@dataclass
class UpdateService(Action):
    service: ServiceItem
    collections = ("services",)
    message = "Service Blueprint Updated"


@dataclass
class DeleteService(Action):
    service_id: str
    collections = ("services",)
    message = "Service Blueprint Purged"
    kind = "error"


@dataclass
class DeleteServiceCategory(Action):
    pillar: CoreService
    category: str
    collections = ("services",)
    kind = "error"

    def notice(self, state: AppState) -> Optional[Notice]:
        return f"{self.category} Service Group Purged", self.kind


# Sales


@dataclass
class AddQuotation(Action):
    quotation: Quotation
    collections = ("quotations",)
    message = "Quotation Saved"


@dataclass
class EditQuotation(Action):
    quotation: Quotation
    collections = ("quotations",)
    message = "Quotation Updated"


@dataclass
class DeleteQuotation(Action):
    quotation_id: str
    collections = ("quotations",)
    message = "Quotation Purged"
    kind = "error"


@dataclass
class AddCoupon(Action):
    coupon: Coupon
    collections = ("coupons",)
    message = "Discount Code Live"


@dataclass
class DeleteCoupon(Action):
    code: str
    collections = ("coupons",)
    message = "Coupon Revoked"
    kind = "error"


# Admin and session


@dataclass
class ToggleAgencyConfig(Action):
    key: str

    def notice(self, state: AppState) -> Optional[Notice]:
        engaged = getattr(state.agency, self.key)
        return f"{self.key} protocol {'engaged' if engaged else 'disengaged'}", self.kind


@dataclass
class ResetDemoData(Action):
    collections = ("projects", "clients")
    message = "System Reset Complete"
    kind = "error"


@dataclass
class Login(Action):
    user: SessionUser
    collections = ("auth",)

    def notice(self, state: AppState) -> Optional[Notice]:
        return f"Authentication successful. Session started for {self.user.name}", self.kind


@dataclass
class Logout(Action):
    collections = ("auth",)
