"""Address book API client.

A thin wrapper around the two contact endpoints of the Address Book
API, built on ``requests``.  Methods never raise on HTTP or network
failures; instead every call returns a ``(data, error)`` tuple where
``error`` is ``None`` on success or a dictionary with keys
``status_code`` and ``message`` describing the failure.

* :meth:`AddressBookAPI.list_contacts` – fetch every contact.
* :meth:`AddressBookAPI.create_contact` – create a contact.

The base URL already includes the API prefix, e.g.
``http://localhost:5000/api``.  When not given explicitly it is read
from the ``ADDRESS_BOOK_API_URL`` environment variable.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:5000/api"
REQUEST_TIMEOUT = 15


def default_base_url() -> str:
    return os.getenv("ADDRESS_BOOK_API_URL", DEFAULT_BASE_URL)


class AddressBookAPI:
    """Client for the contact endpoints."""

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the API including its prefix.  Defaults
                to :func:`default_base_url`.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = (base_url or default_base_url()).rstrip("/")
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  On success ``data`` holds the
            parsed JSON body.  On failure ``data`` is ``None`` and
            ``error`` carries ``status_code`` (``None`` for network
            errors) and ``message``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=REQUEST_TIMEOUT,
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
                    if isinstance(err_json, dict):
                        message = str(err_json.get("message") or err_json.get("detail") or err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Contact operations
    # ------------------------------------------------------------------
    def list_contacts(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all contacts.

        Returns:
            A tuple ``(contacts, error)``.  ``contacts`` is empty on
            failure.
        """
        data, error = self._request("GET", "/contacts")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def create_contact(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Create a contact.

        Args:
            payload: Mapping with ``name``, ``email``, ``phone`` and
                ``address``.  Sent as is; the server does not validate it.
        Returns:
            A tuple ``(contact, error)``.
        """
        data, error = self._request("POST", "/contacts", json_body=payload)
        if error:
            return None, error
        return data, None
