"""Logging setup for studiodesk entry points."""
from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger once for an embedding application.

    ``level`` wins over ``LOG_LEVEL``; both default to ``INFO``. At INFO the
    store reports each collection it rewrites and the assistant reports every
    quotation it drafts. DEBUG adds per-file storage writes and no-op actions.
    """

    logging.basicConfig(level=(level or os.getenv("LOG_LEVEL") or "INFO").upper(), format=LOG_FORMAT)
