"""
Configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for every field so the
application starts against a local MongoDB without any setup.  The
entry point (``run.py``) loads a ``.env`` file before this module is
imported.
"""

import os
from dataclasses import dataclass
from typing import Optional, Tuple
from urllib.parse import quote_plus


def split_csv(value: Optional[str]) -> Tuple[str, ...]:
    """Split a comma‑separated environment value into stripped items."""
    if not value:
        return ()
    return tuple(item.strip() for item in value.split(",") if item.strip())


def build_mongodb_uri(
    uri: Optional[str],
    user: Optional[str],
    password: Optional[str],
    cluster: str,
) -> str:
    """Return the connection string for the document store.

    An explicit ``uri`` always wins.  Otherwise, when both credentials
    are present, an Atlas SRV string is assembled for ``cluster`` with
    the credentials percent‑escaped.  Without credentials the local
    default is used.
    """
    if uri:
        return uri
    if user and password:
        return (
            f"mongodb+srv://{quote_plus(user)}:{quote_plus(password)}@{cluster}/"
            "?retryWrites=true&w=majority"
        )
    return "mongodb://localhost:27017"


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Event Planner API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    environment: str = os.getenv("ENVIRONMENT", os.getenv("NODE_ENV", "development"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))

    # Routes are served from the root by default so existing frontends
    # keep working.  Set API_PREFIX=/api/v1 to mount them elsewhere.
    api_prefix: str = os.getenv("API_PREFIX", "").rstrip("/")

    mongodb_uri: str = build_mongodb_uri(
        os.getenv("MONGODB_URI"),
        os.getenv("DB_USER"),
        os.getenv("DB_PASS"),
        os.getenv("DB_CLUSTER", "cluster0.dm5zycv.mongodb.net"),
    )
    database_name: str = os.getenv("DATABASE_NAME", "SRevent")
    server_selection_timeout_ms: int = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))

    cors_origins: Tuple[str, ...] = split_csv(os.getenv("CORS_ORIGINS", "http://localhost:3000"))
    cors_production_domains: Tuple[str, ...] = split_csv(os.getenv("CORS_PRODUCTION_DOMAINS"))

    # Legacy deployments only kept a fixed set of event fields
    # (EVENT_FIELDS="EventName,Genre,Price").  Empty means events are
    # stored as sent.
    event_fields: Tuple[str, ...] = split_csv(os.getenv("EVENT_FIELDS"))

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
