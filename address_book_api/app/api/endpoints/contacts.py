"""
Contact endpoints.

Two routes only: list every contact and create one.  There is no
authentication, pagination or update/delete.  Store failures are not
caught here; the application-wide ``sqlite3.Error`` handler turns them
into HTTP 500 responses.
"""

import sqlite3
from typing import List

from fastapi import APIRouter, Depends

from address_book_api.app.core.db import get_db
from address_book_api.app.schemas.contact import ContactCreate, ContactRead
from address_book_api.app.services.contact_service import ContactService

router = APIRouter()


@router.get("/contacts", response_model=List[ContactRead])
async def list_contacts(conn: sqlite3.Connection = Depends(get_db)) -> List[ContactRead]:
    """Return all contacts in store order."""
    return await ContactService.list_contacts(conn)


@router.post("/contacts", response_model=ContactRead)
async def create_contact(
    contact_in: ContactCreate,
    conn: sqlite3.Connection = Depends(get_db),
) -> ContactRead:
    """Create a contact and return it with its new ``id``.

    Responds with 200 rather than 201 to match the existing clients.
    """
    return await ContactService.create_contact(conn, contact_in)
