"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path

from movies_api.core.origin_policy import DEFAULT_ALLOWED_ORIGINS


def get_seed_path() -> str:
    """Get seed data file path from env or default."""
    return os.getenv("MOVIES_SEED_PATH", "") or str(
        Path(__file__).resolve().parents[1] / "data" / "movies.json"
    )


def get_allowed_origins() -> list[str]:
    """Get CORS allow-list from env (comma separated) or default."""
    raw = os.getenv("ALLOWED_ORIGINS", "")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or list(DEFAULT_ALLOWED_ORIGINS)


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("PORT", "1234"))
