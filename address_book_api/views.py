"""
View state for address book front ends.

``ContactListView`` holds the list shown to the user and
``ContactForm`` holds the create form.  Both talk to the server only
through :class:`~address_book_api.client.AddressBookAPI`.  The two are
independent: submitting the form does not refresh the list, which is
loaded once when the view is mounted.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Optional

from address_book_api.client import AddressBookAPI

logger = logging.getLogger(__name__)

CONTACT_FIELDS = ("name", "email", "phone", "address")


def format_contact(contact: Dict[str, Any]) -> str:
    """Render a contact as ``name - email - phone - address``."""
    return " - ".join(str(contact.get(field, "")) for field in CONTACT_FIELDS)


class ContactListView:
    """List of contacts loaded from the API exactly once."""

    def __init__(self, api: AddressBookAPI) -> None:
        self.api = api
        self.contacts: List[Dict[str, Any]] = []
        self.mounted = False
        self.last_error: Optional[Dict[str, Any]] = None

    def mount(self) -> List[Dict[str, Any]]:
        """Fetch the contact list on first mount.

        Later calls return the current state without another request.
        A failed request leaves ``contacts`` unchanged.
        """
        if self.mounted:
            return self.contacts
        self.mounted = True
        contacts, error = self.api.list_contacts()
        if error:
            self.last_error = error
            logger.warning("Could not load contacts: %s", error["message"])
            return self.contacts
        self.contacts = contacts
        return self.contacts

    def render(self) -> Iterator[str]:
        for contact in self.contacts:
            yield format_contact(contact)


class ContactForm:
    """Controlled form for creating a contact."""

    def __init__(self, api: AddressBookAPI) -> None:
        self.api = api
        self.values: Dict[str, str] = {field: "" for field in CONTACT_FIELDS}
        self.last_error: Optional[Dict[str, Any]] = None

    def set_field(self, name: str, value: str) -> None:
        if name not in self.values:
            raise KeyError(f"Unknown contact field: {name}")
        self.values[name] = value

    def submit(self) -> Optional[Dict[str, Any]]:
        """Send the form to the API.

        On success the fields are cleared and the created contact is
        returned.  On failure the values are kept, ``last_error`` is set
        and ``None`` is returned.
        """
        contact, error = self.api.create_contact(dict(self.values))
        if error:
            self.last_error = error
            return None
        self.last_error = None
        self.values = {field: "" for field in CONTACT_FIELDS}
        return contact
