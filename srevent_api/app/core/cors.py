"""
Cross‑origin policy.

Browsers may call the API from the origins listed in settings.  In
production any Vercel preview or production deployment is accepted;
during development any ``http://localhost:<port>`` origin is.  Requests
that carry no ``Origin`` header (curl, mobile apps) are never affected.
"""

from typing import List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings


def allowed_origin_regex(settings: Settings) -> Optional[str]:
    """Return the origin pattern for the current environment."""
    if settings.is_production:
        return r".*\.vercel\.app"
    return r"http://localhost:.*"


def allowed_origins(settings: Settings) -> List[str]:
    return list(settings.cors_origins) + list(settings.cors_production_domains)


def configure_cors(app: FastAPI, settings: Settings) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins(settings),
        allow_origin_regex=allowed_origin_regex(settings),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
