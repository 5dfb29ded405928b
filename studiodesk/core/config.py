"""Runtime configuration resolved from environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from studiodesk.core.utils import get_config_value, load_env_file

DEFAULT_ENV_FILE = Path("secrets/studiodesk.env")


def _flag(key: str, default: str) -> bool:
    return get_config_value(key, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class AgencyConfig:
    """Agency-wide feature toggles surfaced in the admin panel."""

    public_portfolio: bool = True
    auto_invoicing: bool = False
    ai_scoping: bool = True


@dataclass
class AppConfig:
    data_dir: Path = Path("data")
    storage_prefix: str = "lc_"
    notification_ttl: float = 3.0
    agency: AgencyConfig = field(default_factory=AgencyConfig)

    @classmethod
    def from_env(cls, env_file: Path | None = None) -> "AppConfig":
        """Build a config from ``STUDIODESK_*`` variables.

        Values from ``env_file`` (or ``STUDIODESK_ENV_FILE``) are loaded first
        but never override variables already present in the environment.
        """

        path = env_file or Path(os.getenv("STUDIODESK_ENV_FILE", DEFAULT_ENV_FILE))
        load_env_file(path)
        return cls(
            data_dir=Path(get_config_value("STUDIODESK_DATA_DIR", "data")),
            storage_prefix=get_config_value("STUDIODESK_STORAGE_PREFIX", "lc_"),
            notification_ttl=float(get_config_value("STUDIODESK_NOTIFICATION_TTL", "3.0")),
            agency=AgencyConfig(
                public_portfolio=_flag("STUDIODESK_PUBLIC_PORTFOLIO", "1"),
                auto_invoicing=_flag("STUDIODESK_AUTO_INVOICING", "0"),
                ai_scoping=_flag("STUDIODESK_AI_SCOPING", "1"),
            ),
        )
