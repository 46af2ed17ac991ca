"""
Application settings.

Single source of truth for:
- Database location
- Local user id used by the address screen
- Log level
- Form input limits
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


# Max characters for free-text address inputs.
FORM_CHARACTER_LIMIT = 50

# Longest postal code accepted by the input widget (e.g. "12345-6789").
ZIP_CODE_MAX_LENGTH = 10


@dataclass(frozen=True)
class Settings:
    """Runtime settings resolved from the environment."""
    db_path: Path
    user_id: str = "local"
    log_level: str = "INFO"


def _default_db_path() -> Path:
    return Path.home() / ".home_address" / "home_address.db"


def load_settings() -> Settings:
    """
    Build Settings from environment variables.

    HOME_ADDRESS_DB         -> sqlite file path
    HOME_ADDRESS_USER       -> user id for the stored address
    HOME_ADDRESS_LOG_LEVEL  -> logging level name
    """
    raw_db = (os.environ.get("HOME_ADDRESS_DB") or "").strip()
    db_path = Path(raw_db).expanduser() if raw_db else _default_db_path()

    user_id = (os.environ.get("HOME_ADDRESS_USER") or "").strip() or "local"
    log_level = (os.environ.get("HOME_ADDRESS_LOG_LEVEL") or "").strip().upper() or "INFO"

    return Settings(db_path=db_path, user_id=user_id, log_level=log_level)


SETTINGS = load_settings()
