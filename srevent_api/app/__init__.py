"""
Application package initializer.

Each resource (events, bookings, messages, users) has its own service
in ``services`` and its own router in ``api/v1/endpoints``.  Routers are
grouped under ``api/<version>/`` so that a future version can be
mounted next to the current one.
"""

from .main import app  # noqa: F401
