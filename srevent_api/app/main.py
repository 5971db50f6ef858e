"""
Main entrypoint for the SRevent planner API.

This module assembles the FastAPI application: logging, the origin
policy, exception handlers, the versioned router and the lifetime of
the MongoDB client.  ``create_app`` builds and configures the app,
which is then instantiated at module import time as ``app``::

    uvicorn srevent_api.app.main:app --reload

The client is opened in the startup handler and closed in the shutdown
handler; route handlers receive the database through the
``get_database`` dependency.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from pymongo import MongoClient

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.cors import configure_cors
from .core.db import create_client, ping
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging


def create_app(mongo_client: Optional[MongoClient] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    mongo_client : Optional[MongoClient]
        A client to use instead of building one from settings.  The
        application neither pings nor closes a client it was given.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the handlers below
    # can log.
    setup_logging(settings)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    configure_cors(app, settings)
    register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        owns_client = mongo_client is None
        client = create_client(settings) if owns_client else mongo_client
        app.state.mongo_client = client
        app.state.owns_mongo_client = owns_client
        app.state.db = client[settings.database_name]
        if owns_client:
            if await ping(client):
                logger.info("MongoDB connected successfully (database %s)", settings.database_name)
            else:
                logger.error("MongoDB is unreachable; requests will fail until it recovers")

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        client = getattr(app.state, "mongo_client", None)
        if client is not None and app.state.owns_mongo_client:
            client.close()
            logger.info("MongoDB client closed")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
