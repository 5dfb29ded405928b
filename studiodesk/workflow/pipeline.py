"""Pipeline stage navigation for project cards."""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, Iterable, List

from studiodesk.core.models import Project, ProjectStatus

logger = logging.getLogger(__name__)

PIPELINE_SEQUENCE = (
    ProjectStatus.INQUIRY,
    ProjectStatus.QUOTED,
    ProjectStatus.CONFIRMED,
    ProjectStatus.SCHEDULED,
    ProjectStatus.SHOT,
    ProjectStatus.POST_PRODUCTION,
    ProjectStatus.RAW_DELIVERY,
    ProjectStatus.FINAL_DELIVERY,
    ProjectStatus.DELIVERED,
    ProjectStatus.CLOSED,
)

# Closed projects stay addressable but get no board column.
BOARD_COLUMNS = PIPELINE_SEQUENCE[:-1]

_STEPS = {"forward": 1, "next": 1, "backward": -1, "prev": -1}


def next_status(status: ProjectStatus | str, direction: str) -> ProjectStatus:
    """Return the neighbouring stage in ``direction``.

    Moves that would leave the sequence keep the current status. On Hold and
    Cancelled are outside the sequence and never move.
    """

    try:
        step = _STEPS[direction]
    except KeyError:
        raise ValueError(f"Unknown pipeline direction: {direction!r}") from None

    current = ProjectStatus(status)
    if current not in PIPELINE_SEQUENCE:
        return current

    index = PIPELINE_SEQUENCE.index(current) + step
    if index < 0 or index >= len(PIPELINE_SEQUENCE):
        return current
    return PIPELINE_SEQUENCE[index]


def move_project(projects: Iterable[Project], project_id: str, direction: str) -> List[Project]:
    """Return a copy of ``projects`` with one project's status moved a step."""

    moved: List[Project] = []
    found = False
    for project in projects:
        if project.id == project_id:
            found = True
            target = next_status(project.status, direction)
            if target != project.status:
                logger.info("Project %s moved %s -> %s", project.id, project.status.value, target.value)
                project = replace(project, status=target)
            else:
                logger.debug("Project %s already at the %s boundary", project.id, direction)
        moved.append(project)

    if not found:
        logger.debug("Ignoring move for unknown project %s", project_id)
    return moved


def group_by_column(projects: Iterable[Project]) -> Dict[ProjectStatus, List[Project]]:
    """Group projects under each board column in pipeline order."""

    columns: Dict[ProjectStatus, List[Project]] = {status: [] for status in BOARD_COLUMNS}
    for project in projects:
        if project.status in columns:
            columns[project.status].append(project)
    return columns
