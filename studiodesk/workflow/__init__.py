"""Project pipeline workflow helpers."""
from studiodesk.workflow.pipeline import (
    BOARD_COLUMNS,
    PIPELINE_SEQUENCE,
    group_by_column,
    move_project,
    next_status,
)

__all__ = [
    "BOARD_COLUMNS",
    "PIPELINE_SEQUENCE",
    "group_by_column",
    "move_project",
    "next_status",
]
