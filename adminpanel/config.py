# adminpanel/config.py

"""
Central configuration for the admin panel.

Values are read from environment variables; a local .env file is loaded
first so development setups do not need to export anything.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


# ---------------------------------------------------------
#  📦 CONFIG STRUCTURES
# ---------------------------------------------------------


@dataclass(frozen=True)
class DatabaseConfig:
    url: str = field(
        default_factory=lambda: os.getenv("ADMINPANEL_DATABASE_URL", "sqlite:///./adminpanel.db")
    )
    echo: bool = field(default_factory=lambda: _env_bool("ADMINPANEL_DATABASE_ECHO", "false"))


@dataclass(frozen=True)
class LockConfig:
    """Optimistic lock protection for admin edit forms."""
    # Attach LockExtension to every admin registered in a pool
    protection: bool = field(default_factory=lambda: _env_bool("ADMINPANEL_LOCK_PROTECTION", "true"))
    field_name: str = field(
        default_factory=lambda: os.getenv("ADMINPANEL_LOCK_FIELD_NAME", "_lock_version")
    )


@dataclass(frozen=True)
class AppConfig:
    database: DatabaseConfig
    lock: LockConfig


# ---------------------------------------------------------
#  🔧 SINGLETON ACCESSOR
# ---------------------------------------------------------

_config_singleton: AppConfig | None = None


def get_config() -> AppConfig:
    global _config_singleton
    if _config_singleton is None:
        _config_singleton = AppConfig(
            database=DatabaseConfig(),
            lock=LockConfig(),
        )
    return _config_singleton


def reset_config() -> None:
    """Drop the cached config so the next get_config() re-reads the environment."""
    global _config_singleton
    _config_singleton = None
