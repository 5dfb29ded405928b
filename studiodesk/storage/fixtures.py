"""Bundled demo data used when nothing has been persisted yet."""
import copy
from typing import Any, Dict, List

CLIENTS = [
    {
        "id": "1",
        "name": "Acme Corp",
        "type": "Corporate",
        "email": "contact@acme.com",
        "phone": "+91 8811186951",
        "address": "Guwahati, Assam",
        "total_revenue": 45000,
        "past_projects": 3,
    },
    {
        "id": "2",
        "name": "Ritu & Sandeep",
        "type": "Individual",
        "email": "ritu@wedding.in",
        "phone": "+91 9900011223",
        "address": "Shillong, Meghalaya",
        "total_revenue": 12500,
        "past_projects": 1,
    },
]

PROJECTS = [
    {
        "id": "PRJ-2024-001",
        "title": "The Wedding of Ritu & Sandeep",
        "status": "Shot",
        "creation_date": "2023-10-01",
        "project_owner": "System Admin",
        "client_id": "2",
        "client_name": "Ritu & Sandeep",
        "client_type": "Individual",
        "primary_contact": "Ritu Sharma",
        "phone": "+91 9900011223",
        "email": "ritu@wedding.in",
        "location": "Shillong, Meghalaya",
        "reference_source": "Instagram",
        "category": "Wedding",
        "tier": "Premium",
        "project_type": "Photography",
        "selected_package": "Classic Cinematic",
        "starting_price": 6850,
        "shoot_type": "Multi-day",
        "shoot_dates": ["2023-11-12", "2023-11-13"],
        "time_slot": "Full-Day",
        "delivery_deadline": "2023-12-15",
        "event_locations": "Pinewood Hotel, Shillong",
        "services_included": "Cinematic Photography, Raw Transfers, Drone Stills",
        "special_requirements": "Drone Aerials requested for ceremony",
        "client_expectations": "Vibrant, high-contrast edits",
        "constraints": "Outdoor lighting sensitivity",
        "quotation_id": "QT-2024-912",
        "budget": 12500,
        "next_action_required": "Import raw files to station",
        "responsible_role": "Creative Lead",
        "crew_assigned": True,
        "equipment_assigned": True,
        "freelancers_involved": True,
        "assigned_team": ["f1", "f3"],
        "invoice_status": "Paid",
        "payment_status": "Paid",
        "advance_received": True,
        "outstanding_amount": 0,
        "estimated_margin": 35,
        "internal_notes": "VIP wedding, ensure Rahul is lead",
        "created_by": "System Admin",
        "last_modified_by": "System Admin",
        "last_modified_date": "2023-11-14",
    },
]

ASSETS = [
    {"id": "a1", "name": "Sony 6000", "category": "Camera", "status": "Available", "cost": 45000,
     "rental_rate": 1500, "project_types": ["Photography"], "suitable_categories": ["Crop sensor camera"]},
    {"id": "a2", "name": "Canon M50", "category": "Camera", "status": "Available", "cost": 55000,
     "rental_rate": 2100, "project_types": ["Photography"], "suitable_categories": ["Crop sensor camera"]},
    {"id": "a3", "name": "Sony SII", "category": "Camera", "status": "In Use", "cost": 180000,
     "rental_rate": 3800, "project_types": ["Photography", "Videography"],
     "suitable_categories": ["Full sensor camera"]},
    {"id": "e1", "name": "Ronin RC Gimbal", "category": "Accessory", "status": "Available", "cost": 35000,
     "rental_rate": 900, "project_types": ["Videography"], "suitable_categories": ["Stabilization"]},
    {"id": "e2", "name": "Godox LC500 Light Stick", "category": "Light", "status": "Available", "cost": 15000,
     "rental_rate": 250, "project_types": ["Photography", "Videography"], "suitable_categories": ["RGB Lighting"]},
]

CONTRACTORS = [
    {"id": "f1", "name": "Rahul Sinha", "role": "Photographer", "level": "Mid", "rate_per_day": 2000,
     "rating": 4.8, "status": "Available", "verified": True, "expertise": ["Photography"],
     "suitable_categories": ["Traditional Photography"]},
    {"id": "f2", "name": "Samrat Sinha", "role": "Photographer", "level": "Mid", "rate_per_day": 2300,
     "rating": 4.9, "status": "Available", "verified": True, "expertise": ["Photography"],
     "suitable_categories": ["Classic Wedding"]},
    {"id": "f3", "name": "Rupom Sinha", "role": "Photographer", "level": "Mid", "rate_per_day": 2000,
     "rating": 4.7, "status": "Available", "verified": True, "expertise": ["Photography"],
     "suitable_categories": ["Traditional Photography"]},
    {"id": "f4", "name": "Shiv Narayan Das", "role": "Photographer", "level": "Senior", "rate_per_day": 1900,
     "rating": 5.0, "status": "Available", "verified": True, "expertise": ["Photography"],
     "suitable_categories": ["Expert Traditional"]},
]

SERVICES = [
    {
        "id": "s1",
        "pillar": "Photography",
        "category": "Wedding",
        "plan_name": "Traditional Package",
        "price": 5200,
        "rate_type": "Fixed",
        "description": "Entry-level traditional coverage.",
        "theme_index": 1,
        "items": [
            {"id": "i1", "name": "Single Photographer (Crop Sensor)", "price": 3500, "is_mandatory": True},
            {"id": "i2", "name": "Basic Retouching (50 Photos)", "price": 1000, "is_mandatory": True},
            {"id": "i3", "name": "Online Delivery Hub", "price": 700, "is_mandatory": True},
            {"id": "i4", "name": "Printed Hard-copy Album", "price": 4000, "is_mandatory": False},
        ],
    },
    {
        "id": "s2",
        "pillar": "Photography",
        "category": "Wedding",
        "plan_name": "Classic Cinematic",
        "price": 6850,
        "rate_type": "Fixed",
        "description": "High-end cinematic wedding stills.",
        "theme_index": 0,
        "items": [
            {"id": "i5", "name": "Premium Photographer (Full Sensor)", "price": 4850, "is_mandatory": True},
            {"id": "i6", "name": "Professional Editing (100 Photos)", "price": 2000, "is_mandatory": True},
            {"id": "i7", "name": "Unlimited Raw Transfers", "price": 0, "is_mandatory": True},
            {"id": "i8", "name": "Drone Aerial Shots", "price": 3000, "is_mandatory": False},
        ],
    },
    {
        "id": "s3",
        "pillar": "Videography",
        "category": "Event",
        "plan_name": "Recap Protocol",
        "price": 3000,
        "rate_type": "Fixed",
        "description": "Standard event recap video.",
        "theme_index": 2,
        "items": [
            {"id": "i9", "name": "Cinematographer (3 Hours)", "price": 2000, "is_mandatory": True},
            {"id": "i10", "name": "Video Editing (30 Mins)", "price": 1000, "is_mandatory": True},
        ],
    },
]

QUOTATIONS = [
    {
        "id": "QT-2024-881",
        "client_id": "1",
        "client_name": "Acme Corp",
        "date": "2024-03-15",
        "start_date": "2024-04-10",
        "end_date": "2024-04-10",
        "expiry_date": "2024-03-29",
        "project_type": "Videography",
        "tier": "Premium",
        "items": [
            {"description": "Recap Protocol", "quantity": 1, "price": 3000, "type": "catalog"},
            {"description": "Drone Aerial Coverage", "quantity": 1, "price": 2500, "type": "resource"},
            {"description": "4K Cinema Delivery", "quantity": 1, "price": 1500, "type": "manual"},
        ],
        "total_amount": 7000,
        "status": "Sent",
    },
    {
        "id": "QT-2024-912",
        "client_id": "2",
        "client_name": "Ritu & Sandeep",
        "date": "2023-11-01",
        "start_date": "2023-11-12",
        "end_date": "2023-11-13",
        "expiry_date": "2023-11-15",
        "project_type": "Photography",
        "tier": "Premium",
        "items": [
            {"description": "Classic Cinematic", "quantity": 1, "price": 6850, "type": "catalog"},
            {"description": "Luxury Leather Album", "quantity": 1, "price": 4000, "type": "manual"},
            {"description": "Additional Lead Photographer", "quantity": 1, "price": 1650, "type": "resource"},
        ],
        "total_amount": 12500,
        "status": "Accepted",
    },
]

INVOICES = [
    {"id": "INV-2023-001", "client_name": "Ritu & Sandeep", "amount": 12500, "date": "2023-11-15", "status": "Paid"},
]

COUPONS = [
    {"code": "WINTER20", "discount_type": "Percentage", "value": 20, "expiry": "2024-12-31"},
    {"code": "FIRST500", "discount_type": "Fixed", "value": 500, "expiry": "2025-01-01"},
]

_FIXTURES: Dict[str, List[Dict[str, Any]]] = {
    "clients": CLIENTS,
    "projects": PROJECTS,
    "contractors": CONTRACTORS,
    "assets": ASSETS,
    "invoices": INVOICES,
    "services": SERVICES,
    "quotations": QUOTATIONS,
    "coupons": COUPONS,
    "logs": [],
}


def load_fixtures() -> Dict[str, List[Dict[str, Any]]]:
    """Return a fresh copy of every seed collection keyed by storage key."""

    return copy.deepcopy(_FIXTURES)
