"""Pure state transitions: ``reduce(state, action) -> state``."""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable, Dict, Tuple, Type

from studiodesk.core.models import Client, Project
from studiodesk.core.state import AppState
from studiodesk.storage.fixtures import load_fixtures
from studiodesk.store import actions as a
from studiodesk.workflow.pipeline import move_project

logger = logging.getLogger(__name__)

Handler = Callable[[AppState, Any], AppState]


def _append(items: Tuple, record: Any) -> Tuple:
    return items + (record,)


def _prepend(items: Tuple, record: Any) -> Tuple:
    return (record,) + items


def _replace(items: Tuple, record: Any, key: str = "id") -> Tuple:
    target = getattr(record, key)
    return tuple(record if getattr(item, key) == target else item for item in items)


def _remove(items: Tuple, value: Any, key: str = "id") -> Tuple:
    return tuple(item for item in items if getattr(item, key) != value)


def _update(items: Tuple, record_id: str, **changes: Any) -> Tuple:
    return tuple(replace(item, **changes) if item.id == record_id else item for item in items)


def _toggle_asset(state: AppState, action: a.ToggleAssetStatus) -> AppState:
    def _flip(asset):
        status = "In Use" if asset.status == "Available" else "Available"
        return replace(asset, status=status)

    return replace(
        state,
        assets=tuple(_flip(asset) if asset.id == action.asset_id else asset for asset in state.assets),
    )


def _delete_category(state: AppState, action: a.DeleteServiceCategory) -> AppState:
    return replace(
        state,
        services=tuple(
            service
            for service in state.services
            if not (service.pillar == action.pillar and service.category == action.category)
        ),
    )


def _toggle_config(state: AppState, action: a.ToggleAgencyConfig) -> AppState:
    current = getattr(state.agency, action.key)
    return replace(state, agency=replace(state.agency, **{action.key: not current}))


def _reset(state: AppState, action: a.ResetDemoData) -> AppState:
    seeds = load_fixtures()
    return replace(
        state,
        projects=tuple(Project.from_dict(item) for item in seeds["projects"]),
        clients=tuple(Client.from_dict(item) for item in seeds["clients"]),
    )


_HANDLERS: Dict[Type[a.Action], Handler] = {
    a.AddClient: lambda s, x: replace(s, clients=_append(s.clients, x.client)),
    a.EditClient: lambda s, x: replace(s, clients=_replace(s.clients, x.client)),
    a.DeleteClient: lambda s, x: replace(s, clients=_remove(s.clients, x.client_id)),
    a.AddProject: lambda s, x: replace(s, projects=_prepend(s.projects, x.project)),
    a.EditProject: lambda s, x: replace(s, projects=_replace(s.projects, x.project)),
    a.DeleteProject: lambda s, x: replace(s, projects=_remove(s.projects, x.project_id)),
    a.MoveProject: lambda s, x: replace(s, projects=tuple(move_project(s.projects, x.project_id, x.direction))),
    a.AddAsset: lambda s, x: replace(s, assets=_append(s.assets, x.asset)),
    a.ToggleAssetStatus: _toggle_asset,
    a.SetAssetStatus: lambda s, x: replace(s, assets=_update(s.assets, x.asset_id, status=x.status)),
    a.UpdateAssetOptions: lambda s, x: replace(s, assets=_update(s.assets, x.asset_id, **x.options)),
    a.DeleteAsset: lambda s, x: replace(s, assets=_remove(s.assets, x.asset_id)),
    a.AddFreelancer: lambda s, x: replace(s, contractors=_append(s.contractors, x.freelancer)),
    a.UpdateFreelancerRating: lambda s, x: replace(
        s, contractors=_update(s.contractors, x.freelancer_id, rating=x.rating)
    ),
    a.SetFreelancerStatus: lambda s, x: replace(
        s, contractors=_update(s.contractors, x.freelancer_id, status=x.status)
    ),
    a.UpdateFreelancerOptions: lambda s, x: replace(
        s, contractors=_update(s.contractors, x.freelancer_id, **x.options)
    ),
    a.DeleteFreelancer: lambda s, x: replace(s, contractors=_remove(s.contractors, x.freelancer_id)),
    a.AddInvoice: lambda s, x: replace(s, invoices=_append(s.invoices, x.invoice)),
    a.AddService: lambda s, x: replace(s, services=_append(s.services, x.service)),
    a.UpdateService: lambda s, x: replace(s, services=_replace(s.services, x.service)),
    a.DeleteService: lambda s, x: replace(s, services=_remove(s.services, x.service_id)),
    a.DeleteServiceCategory: _delete_category,
    a.AddQuotation: lambda s, x: replace(s, quotations=_prepend(s.quotations, x.quotation)),
    a.EditQuotation: lambda s, x: replace(s, quotations=_replace(s.quotations, x.quotation)),
    a.DeleteQuotation: lambda s, x: replace(s, quotations=_remove(s.quotations, x.quotation_id)),
    a.AddCoupon: lambda s, x: replace(s, coupons=_append(s.coupons, x.coupon)),
    a.DeleteCoupon: lambda s, x: replace(s, coupons=_remove(s.coupons, x.code, key="code")),
    a.ToggleAgencyConfig: _toggle_config,
    a.ResetDemoData: _reset,
    a.Login: lambda s, x: replace(s, session=x.user),
    a.Logout: lambda s, x: replace(s, session=None),
}


def reduce(state: AppState, action: a.Action) -> AppState:
    """Apply one action. Unknown ids leave the collection unchanged."""

    try:
        handler = _HANDLERS[type(action)]
    except KeyError:
        raise TypeError(f"Unsupported action: {type(action).__name__}") from None
    return handler(state, action)
