"""Entry point for the SRevent planner API.

Loads a ``.env`` file from the current directory, then serves the
FastAPI application with Uvicorn on ``HOST``/``PORT`` (defaults
``0.0.0.0`` and ``5000``).  Database credentials (``MONGODB_URI`` or
``DB_USER``/``DB_PASS``) and the other supported variables are
described in ``srevent_api/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio
import logging

from dotenv import load_dotenv

# Settings are read at import time, so the environment must be complete
# before the application package is imported.
load_dotenv()

from uvicorn import Config, Server  # noqa: E402

from srevent_api.app.core.config import settings  # noqa: E402
from srevent_api.app.main import app  # noqa: E402


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Event Planner server running on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
