"""
Environment-driven settings.

Values come from the process environment. A `.env` file in the working
directory is loaded first; variables already set in the environment win.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "postgres"
    db_user: str = "postgres"
    db_password: str = ""
    # Full DSN; when set it takes precedence over the db_* parts.
    database_url: str = ""
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"


def load_settings() -> Settings:
    load_dotenv(Path.cwd() / ".env", override=False)
    return Settings(
        db_host=_env_str("DB_HOST", "localhost"),
        db_port=_env_int("DB_PORT", 5432),
        db_database=_env_str("DB_DATABASE", "postgres"),
        db_user=_env_str("DB_USER", "postgres"),
        # Passwords are taken verbatim; surrounding whitespace may be significant.
        db_password=os.environ.get("DB_PASSWORD", ""),
        database_url=os.environ.get("DATABASE_URL", "").strip(),
        host=_env_str("HOST", "0.0.0.0"),
        port=_env_int("PORT", 3000),
        log_level=_env_str("LOG_LEVEL", "INFO").upper(),
    )
