"""Application store: typed actions, the pure reducer and the persisting store."""
from studiodesk.store import actions
from studiodesk.store.factories import (
    new_asset,
    new_client,
    new_freelancer,
    new_invoice,
    new_project,
)
from studiodesk.store.notifications import Notification, Notifier
from studiodesk.store.reducer import reduce
from studiodesk.store.store import MutationHook, Store, log_mutation

__all__ = [
    "actions",
    "MutationHook",
    "Notification",
    "Notifier",
    "Store",
    "log_mutation",
    "new_asset",
    "new_client",
    "new_freelancer",
    "new_invoice",
    "new_project",
    "reduce",
]
