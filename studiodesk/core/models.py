"""Data models for the agency's clients, projects, catalog and sales records."""
from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from typing import Any, Dict, List, Optional


class ProjectStatus(str, Enum):
    INQUIRY = "Inquiry"
    QUOTED = "Quoted"
    CONFIRMED = "Confirmed"
    SCHEDULED = "Scheduled"
    SHOT = "Shot"
    POST_PRODUCTION = "Post-Production"
    RAW_DELIVERY = "Delivery 1: Raw files"
    FINAL_DELIVERY = "Delivery 2: Edited Output"
    DELIVERED = "Delivered"
    CLOSED = "Closed"
    ON_HOLD = "On Hold"
    CANCELLED = "Cancelled"


class ClientType(str, Enum):
    INDIVIDUAL = "Individual"
    CORPORATE = "Corporate"
    AGENCY = "Agency"


class CoreService(str, Enum):
    """Service pillar used to partition the catalog."""

    PHOTOGRAPHY = "Photography"
    VIDEOGRAPHY = "Videography"
    POST_PRODUCTION = "Post-Production"
    HYBRID = "Hybrid"


ASSET_STATUSES = ("Available", "In Use", "Maintenance")
FREELANCER_STATUSES = ("Available", "On Shoot", "Vacation")
QUOTATION_STATUSES = ("Draft", "Sent", "Accepted", "Declined")
INVOICE_STATUSES = ("Paid", "Pending", "Overdue", "Draft")
LINE_ITEM_TYPES = ("catalog", "resource", "manual")


def _plain_dict(pairs) -> Dict[str, Any]:
    return {key: value.value if isinstance(value, Enum) else value for key, value in pairs}


class Record:
    """Serialization helpers shared by every persisted record."""

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready dictionary (enums flattened to their values)."""

        return asdict(self, dict_factory=_plain_dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        """Build a record from a stored dictionary, ignoring unknown keys."""

        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})


@dataclass
class Client(Record):
    """A client profile.

    ``total_revenue`` and ``past_projects`` are denormalized counters that are
    maintained by whoever edits the profile; they are never recomputed from
    projects here (see ``studiodesk.reporting.derived_client_stats``).
    """

    id: str
    name: str = "Unknown"
    type: ClientType = ClientType.CORPORATE
    email: str = ""
    phone: str = ""
    address: str = ""
    total_revenue: float = 0
    past_projects: int = 0

    def __post_init__(self) -> None:
        self.type = ClientType(self.type)


@dataclass
class Project(Record):
    """A project card moving through the production pipeline."""

    id: str
    title: str = "Untitled Project"
    status: ProjectStatus = ProjectStatus.INQUIRY
    creation_date: str = ""
    project_owner: str = ""

    client_id: str = ""
    client_name: str = "Unknown"
    client_type: ClientType = ClientType.INDIVIDUAL
    primary_contact: str = ""
    phone: str = ""
    email: str = ""
    location: str = ""
    reference_source: Optional[str] = None

    category: str = "Wedding"
    tier: str = "Standard"
    project_type: CoreService = CoreService.PHOTOGRAPHY
    selected_package: Optional[str] = None
    starting_price: Optional[float] = None

    shoot_type: str = "Single-day"
    shoot_dates: List[str] = field(default_factory=list)
    time_slot: str = "Full-Day"
    delivery_deadline: str = ""
    event_locations: str = ""

    services_included: str = ""
    special_requirements: Optional[str] = None
    client_expectations: Optional[str] = None
    constraints: Optional[str] = None

    quotation_id: Optional[str] = None
    budget: float = 0

    next_action_required: Optional[str] = None
    responsible_role: Optional[str] = None
    blockers: Optional[str] = None

    crew_assigned: bool = False
    equipment_assigned: bool = False
    freelancers_involved: bool = False
    assigned_team: List[str] = field(default_factory=list)

    invoice_status: str = "Not Created"
    payment_status: str = "Unpaid"
    advance_received: bool = False
    outstanding_amount: float = 0
    estimated_margin: Optional[float] = None

    internal_notes: Optional[str] = None
    communication_notes: Optional[str] = None
    red_flags: Optional[str] = None

    created_by: str = ""
    last_modified_by: str = ""
    last_modified_date: str = ""

    contract_link: Optional[str] = None
    drive_link: Optional[str] = None

    def __post_init__(self) -> None:
        self.status = ProjectStatus(self.status)
        self.client_type = ClientType(self.client_type)
        self.project_type = CoreService(self.project_type)


@dataclass
class PriceVariant(Record):
    id: str
    name: str
    price_difference: float = 0
    variant_price: float = 0
    status: str = "Available"
    is_visible: bool = True


def _variants(raw: Optional[List[Any]]) -> List[PriceVariant]:
    return [v if isinstance(v, PriceVariant) else PriceVariant.from_dict(v) for v in raw or []]


@dataclass
class Asset(Record):
    """An equipment item in the gear inventory."""

    id: str
    name: str
    category: str = "Camera"
    status: str = "Available"
    cost: float = 0
    rental_rate: float = 0
    assigned_to_id: Optional[str] = None
    variants: List[PriceVariant] = field(default_factory=list)
    project_types: List[CoreService] = field(default_factory=list)
    suitable_categories: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.status not in ASSET_STATUSES:
            raise ValueError(f"Unknown asset status: {self.status}")
        self.variants = _variants(self.variants)
        self.project_types = [CoreService(value) for value in self.project_types]


@dataclass
class Freelancer(Record):
    """A contractor in the talent pool."""

    id: str
    name: str
    role: str = "Photographer"
    level: str = "Mid"
    rate_per_day: float = 0
    rating: float = 5.0
    status: str = "Available"
    verified: bool = False
    variants: List[PriceVariant] = field(default_factory=list)
    suitable_categories: List[str] = field(default_factory=list)
    expertise: List[CoreService] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.status not in FREELANCER_STATUSES:
            raise ValueError(f"Unknown freelancer status: {self.status}")
        self.variants = _variants(self.variants)
        self.expertise = [CoreService(value) for value in self.expertise]


@dataclass
class QuotationItem(Record):
    """One priced line within a quotation."""

    description: str
    quantity: float = 1
    price: float = 0
    type: str = "manual"

    def __post_init__(self) -> None:
        if self.type not in LINE_ITEM_TYPES:
            raise ValueError(f"Unknown line item type: {self.type}")


@dataclass
class Quotation(Record):
    """A saved quotation.

    ``total_amount`` is a point-in-time snapshot of the line-item total taken
    when the quotation was saved; later catalog price changes do not touch it.
    """

    id: str
    client_id: str
    client_name: str
    date: str = ""
    start_date: str = ""
    end_date: str = ""
    expiry_date: str = ""
    project_type: CoreService = CoreService.PHOTOGRAPHY
    tier: str = "Standard"
    items: List[QuotationItem] = field(default_factory=list)
    total_amount: float = 0
    status: str = "Draft"

    def __post_init__(self) -> None:
        self.project_type = CoreService(self.project_type)
        self.items = [
            item if isinstance(item, QuotationItem) else QuotationItem.from_dict(item)
            for item in self.items
        ]


@dataclass
class PlanSubItem(Record):
    id: str
    name: str
    price: float = 0
    is_mandatory: bool = True


@dataclass
class ServiceItem(Record):
    """A priced plan within a pillar/category.

    The plan ``price`` is its advertised starting price and is independent of
    the sum of its sub-items.
    """

    id: str
    pillar: CoreService
    category: str
    plan_name: str
    price: float = 0
    rate_type: str = "Fixed"
    description: str = ""
    items: List[PlanSubItem] = field(default_factory=list)
    portfolio_link: Optional[str] = None
    theme_index: Optional[int] = None

    def __post_init__(self) -> None:
        self.pillar = CoreService(self.pillar)
        self.items = [
            item if isinstance(item, PlanSubItem) else PlanSubItem.from_dict(item)
            for item in self.items
        ]


@dataclass
class Invoice(Record):
    id: str
    client_name: str
    amount: float = 0
    date: str = ""
    status: str = "Pending"


@dataclass
class Coupon(Record):
    code: str
    discount_type: str = "Percentage"
    value: float = 0
    expiry: str = ""


@dataclass
class SystemLog(Record):
    id: str
    timestamp: str
    user: str
    action: str
    details: str = ""
    type: str = "System"


@dataclass
class SessionUser(Record):
    """The authenticated user's public profile (never carries the password)."""

    username: str
    name: str
    role: str
