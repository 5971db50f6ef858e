"""Blocking HTTP client for the SRevent planner API.

The client wraps every route of the server in a method that returns a
``(data, error)`` tuple instead of raising:

* on success ``data`` is the decoded JSON body (which may be ``None``
  for a lookup that found nothing) and ``error`` is ``None``;
* on failure ``data`` is ``None`` and ``error`` is a dictionary with
  ``status_code`` (``None`` for transport errors) and ``message``.

This keeps scripts and bots simple: they branch on ``error`` rather than
wrapping every call in ``try``/``except``.  The ``requests`` library is
used internally; pass your own ``session`` to share connection pools or
to mock the transport in tests.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class EventPlannerClient:
    """Client for the events, bookings, messages and users routes."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the API including any prefix, e.g.
                ``https://api.example.com`` or ``http://localhost:5000/api/v1``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/events``).
            json_body: JSON body to send with the request (for POST/PATCH).
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _segment(value: Any) -> str:
        return quote(str(value), safe="")

    # ------------------------------------------------------------------
    # Service
    # ------------------------------------------------------------------
    def health(self) -> Result:
        return self._request("GET", "/health")

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def list_events(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", "/events")
        return data or [], error

    def get_event(self, event_id: str) -> Result:
        return self._request("GET", f"/events/{self._segment(event_id)}")

    def create_event(self, payload: Dict[str, Any]) -> Result:
        return self._request("POST", "/events", json_body=payload)

    def update_event(self, event_id: str, payload: Dict[str, Any]) -> Result:
        return self._request("PATCH", f"/events/{self._segment(event_id)}", json_body=payload)

    def delete_event(self, event_id: str) -> Result:
        return self._request("DELETE", f"/events/{self._segment(event_id)}")

    # ------------------------------------------------------------------
    # Bookings
    # ------------------------------------------------------------------
    def list_bookings(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", "/bookings")
        return data or [], error

    def list_user_bookings(self, email: str) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", f"/bookings/user/{self._segment(email)}")
        return data or [], error

    def get_booking(self, booking_id: str) -> Result:
        return self._request("GET", f"/bookings/{self._segment(booking_id)}")

    def create_booking(self, payload: Dict[str, Any]) -> Result:
        return self._request("POST", "/bookings", json_body=payload)

    def update_booking(self, booking_id: str, status: str, admin_notes: Optional[str] = None) -> Result:
        payload: Dict[str, Any] = {"status": status}
        if admin_notes is not None:
            payload["adminNotes"] = admin_notes
        return self._request("PATCH", f"/bookings/{self._segment(booking_id)}", json_body=payload)

    def delete_booking(self, booking_id: str) -> Result:
        return self._request("DELETE", f"/bookings/{self._segment(booking_id)}")

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------
    def list_messages(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", "/messages")
        return data or [], error

    def get_message(self, message_id: str) -> Result:
        return self._request("GET", f"/messages/{self._segment(message_id)}")

    def create_message(self, payload: Dict[str, Any]) -> Result:
        return self._request("POST", "/messages", json_body=payload)

    def update_message(self, message_id: str, status: str, admin_reply: Optional[str] = None) -> Result:
        payload: Dict[str, Any] = {"status": status}
        if admin_reply is not None:
            payload["adminReply"] = admin_reply
        return self._request("PATCH", f"/messages/{self._segment(message_id)}", json_body=payload)

    def delete_message(self, message_id: str) -> Result:
        return self._request("DELETE", f"/messages/{self._segment(message_id)}")

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", "/users")
        return data or [], error

    def create_user(self, payload: Dict[str, Any]) -> Result:
        return self._request("POST", "/users", json_body=payload)

    def get_user(self, user_id: str) -> Result:
        return self._request("GET", f"/users/id/{self._segment(user_id)}")

    def get_user_by_email(self, email: str) -> Result:
        return self._request("GET", f"/users/{self._segment(email)}")

    def delete_user(self, user_id: str) -> Result:
        return self._request("DELETE", f"/users/{self._segment(user_id)}")
