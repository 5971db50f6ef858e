"""
Top‑level package for the SRevent planner backend.

The package is split into the ASGI application (``srevent_api.app``)
and a small blocking HTTP client (``srevent_api.client``) for scripts
and bots that talk to a running server.
"""

__all__ = []
