"""Transient toast notices that expire after a fixed delay."""
from __future__ import annotations

import itertools
import time
from dataclasses import dataclass
from typing import Callable, List


@dataclass
class Notification:
    id: int
    text: str
    kind: str
    created_at: float


class Notifier:
    def __init__(self, ttl: float = 3.0, clock: Callable[[], float] = time.monotonic) -> None:
        self.ttl = ttl
        self.clock = clock
        self._ids = itertools.count(1)
        self._items: List[Notification] = []

    def push(self, text: str, kind: str = "success") -> Notification:
        notification = Notification(next(self._ids), text, kind, self.clock())
        self._items.append(notification)
        return notification

    def active(self) -> List[Notification]:
        """Return notices younger than the TTL, dropping expired ones."""

        now = self.clock()
        self._items = [n for n in self._items if now - n.created_at < self.ttl]
        return list(self._items)
