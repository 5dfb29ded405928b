"""Repository that maps collections onto a key-value store."""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from studiodesk.core.models import Record, SessionUser
from studiodesk.core.state import COLLECTION_TYPES, SESSION_KEY, AppState
from studiodesk.storage.backend import KeyValueStore
from studiodesk.storage.fixtures import load_fixtures

logger = logging.getLogger(__name__)


class Repository:
    """Loads every collection once and writes whole collections back.

    Missing or unreadable keys fall back to the bundled fixtures so a fresh
    install starts with demo data.
    """

    def __init__(self, store: KeyValueStore, fixtures: Optional[Dict[str, List[Dict[str, Any]]]] = None) -> None:
        self.store = store
        self.fixtures = fixtures

    def load(self) -> AppState:
        seeds = self.fixtures if self.fixtures is not None else load_fixtures()
        collections: Dict[str, tuple] = {}
        for key, record_type in COLLECTION_TYPES.items():
            records = self._load_collection(key, record_type)
            if records is None:
                logger.info("No stored %s found, using bundled data", key)
                records = tuple(record_type.from_dict(item) for item in seeds.get(key, []))
            collections[key] = records

        return AppState(**collections, session=self._load_session())

    def save_all(self, collection_key: str, data: Iterable[Record]) -> None:
        """Persist the full collection under its key."""

        if collection_key not in COLLECTION_TYPES:
            raise KeyError(f"Unknown collection: {collection_key}")
        rows = [record.to_dict() for record in data]
        self.store.set_json(collection_key, rows)
        logger.debug("Saved %d %s", len(rows), collection_key)

    def save_session(self, user: SessionUser) -> None:
        self.store.set_json(SESSION_KEY, user.to_dict())

    def clear_session(self) -> None:
        self.store.delete(SESSION_KEY)

    def _load_collection(self, key: str, record_type: type) -> Optional[tuple]:
        try:
            raw = self.store.get_json(key)
            if raw is None:
                return None
            if not isinstance(raw, list) or not all(isinstance(item, dict) for item in raw):
                raise ValueError("expected a list of objects")
            return tuple(record_type.from_dict(item) for item in raw)
        except (TypeError, ValueError) as exc:
            logger.warning("Stored %s could not be read (%s); falling back to bundled data", key, exc)
            return None

    def _load_session(self) -> Optional[SessionUser]:
        try:
            raw = self.store.get_json(SESSION_KEY)
            if not raw:
                return None
            if not isinstance(raw, dict):
                raise ValueError("expected an object")
            return SessionUser.from_dict(raw)
        except (TypeError, ValueError) as exc:
            logger.warning("Stored session could not be read: %s", exc)
            return None
