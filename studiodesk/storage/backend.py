"""Key-value stores that hold the JSON snapshots of each collection."""
from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """Minimal get/set/delete interface, one JSON document per key."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the raw JSON text stored under ``key`` or ``None``."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store raw JSON text under ``key``, replacing any previous value."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key``; missing keys are ignored."""

    def get_json(self, key: str) -> Any:
        raw = self.get(key)
        return None if raw is None else json.loads(raw)

    def set_json(self, key: str, value: Any) -> None:
        self.set(key, json.dumps(value, ensure_ascii=False))


class MemoryStore(KeyValueStore):
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)


class JsonFileStore(KeyValueStore):
    """Stores each key as ``<prefix><key>.json`` under a directory."""

    def __init__(self, directory: Path, prefix: str = "lc_") -> None:
        self.directory = Path(directory)
        self.prefix = prefix

    def _path(self, key: str) -> Path:
        return self.directory / f"{self.prefix}{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        self._path(key).write_text(value, encoding="utf-8")
        logger.debug("Wrote %s", self._path(key))

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)
