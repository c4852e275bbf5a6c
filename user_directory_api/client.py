"""User Directory API client.

A thin wrapper around the HTTP endpoints exposed by
``user_directory_api.app``.  The client uses the ``requests`` library
internally and exposes one method per operation:

* :meth:`health` – check that the service answers ``ok``.
* :meth:`greet` – fetch the greeting for a user id.
* :meth:`save_user` – store a display name for a user id.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` and ``error`` is a
dictionary with keys ``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15


class UserDirectoryClient:
    """Client for interacting with the user directory service."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        JSON responses are decoded; any other content type is returned
        as text.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            content_type = response.headers.get("content-type", "")
            if content_type.startswith("application/json"):
                return response.json(), None
            return response.text, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = exc.response.text if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def health(self) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Return ``(True, None)`` when the service answers ``ok``."""
        data, error = self._request("GET", "/health")
        if error:
            return False, error
        return data == "ok", None

    def greet(self, user_id: str) -> Tuple[Optional[str], Optional[Dict[str, Any]]]:
        """Return the greeting text for ``user_id``, e.g. ``Hello, Administrator``."""
        return self._request("GET", "/user", params={"id": user_id})

    def save_user(self, user_id: str, name: str) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Store ``name`` for ``user_id`` and return the saved record."""
        return self._request("PUT", "/user", params={"id": user_id}, json_body={"name": name})
