"""Core building blocks for the studiodesk package."""
from studiodesk.core.config import AgencyConfig, AppConfig
from studiodesk.core.logging import configure_logging
from studiodesk.core.models import (
    Asset,
    Client,
    ClientType,
    CoreService,
    Coupon,
    Freelancer,
    Invoice,
    PlanSubItem,
    PriceVariant,
    Project,
    ProjectStatus,
    Quotation,
    QuotationItem,
    ServiceItem,
    SessionUser,
    SystemLog,
)
from studiodesk.core.state import COLLECTION_TYPES, SESSION_KEY, AppState

__all__ = [
    "COLLECTION_TYPES",
    "SESSION_KEY",
    "AppState",
    "AgencyConfig",
    "AppConfig",
    "configure_logging",
    "Asset",
    "Client",
    "ClientType",
    "CoreService",
    "Coupon",
    "Freelancer",
    "Invoice",
    "PlanSubItem",
    "PriceVariant",
    "Project",
    "ProjectStatus",
    "Quotation",
    "QuotationItem",
    "ServiceItem",
    "SessionUser",
    "SystemLog",
]
