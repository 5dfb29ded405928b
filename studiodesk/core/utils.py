"""Shared utility functions for the studiodesk package."""
import logging
import os
import random
from datetime import date, timedelta
from pathlib import Path
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)


def get_config_value(key: str, default: str = "") -> str:
    """Get a configuration value from the environment."""
    return os.getenv(key, default)


def _parse_env_line(line: str) -> Optional[Tuple[str, str]]:
    """Split ``KEY=value`` into a pair; comments, blanks and bare words give ``None``."""
    text = line.strip()
    if text.startswith("export "):
        text = text[len("export "):]
    name, sep, value = text.partition("=")
    name = name.strip()
    if not sep or not name or name.startswith("#"):
        return None
    return name, value.strip().strip("\"'")


def load_env_file(path: Path) -> List[str]:
    """Export ``KEY=value`` lines from ``path`` that are not already set.

    Returns the names that were exported. A missing or unreadable file
    exports nothing.
    """
    try:
        lines = Path(path).read_text(encoding="utf-8").splitlines()
    except FileNotFoundError:
        return []
    except OSError as exc:
        logger.debug("Skipping env file %s: %s", path, exc)
        return []

    exported: List[str] = []
    for pair in filter(None, map(_parse_env_line, lines)):
        name, value = pair
        if name not in os.environ:
            os.environ[name] = value
            exported.append(name)
    if exported:
        logger.debug("Exported %s from %s", ", ".join(exported), path)
    return exported


def generate_id(prefix: str, digits: int = 3, year: Optional[int] = None) -> str:
    """Build a client-side id with a random numeric suffix, e.g. ``QT-581``."""
    low = 10 ** (digits - 1)
    suffix = random.randint(low, 10 ** digits - 1)
    if year is not None:
        return f"{prefix}-{year}-{suffix}"
    return f"{prefix}-{suffix}"


def iso_today(today: Optional[date] = None) -> str:
    return (today or date.today()).isoformat()


def iso_offset(days: int, today: Optional[date] = None) -> str:
    """Return the ISO date ``days`` after ``today``."""
    return ((today or date.today()) + timedelta(days=days)).isoformat()
