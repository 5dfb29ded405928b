"""Back-office toolkit for a photo and video agency."""
from studiodesk.assistant import AIAssistant, AIServiceError, ChatSession
from studiodesk.auth import InvalidCredentialsError, authenticate
from studiodesk.core import (
    AppConfig,
    AppState,
    ProjectStatus,
    configure_logging,
)
from studiodesk.quoting import QuotationDraft, compute_total, toggle_line_item
from studiodesk.storage import JsonFileStore, MemoryStore, Repository
from studiodesk.store import Store, actions, reduce
from studiodesk.workflow import PIPELINE_SEQUENCE, move_project, next_status

__all__ = [
    "AIAssistant",
    "AIServiceError",
    "AppConfig",
    "AppState",
    "ChatSession",
    "InvalidCredentialsError",
    "JsonFileStore",
    "MemoryStore",
    "PIPELINE_SEQUENCE",
    "ProjectStatus",
    "QuotationDraft",
    "Repository",
    "Store",
    "actions",
    "authenticate",
    "compute_total",
    "configure_logging",
    "move_project",
    "next_status",
    "reduce",
    "toggle_line_item",
]
