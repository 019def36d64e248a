"""
Service layer for contacts.

Each operation runs exactly one statement against the ``contacts``
table on the connection it is given.  Store errors (``sqlite3.Error``)
are left to propagate to the caller unchanged; nothing is retried.

All queries use parameterized statements.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List

from address_book_api.app.schemas.contact import ContactCreate, ContactRead

logger = logging.getLogger(__name__)


class ContactService:
    """Service class for listing and creating contacts."""

    @classmethod
    async def list_contacts(cls, conn: sqlite3.Connection) -> List[ContactRead]:
        """Return every contact in the order the store yields them.

        No ``ORDER BY`` is applied.  An empty table returns an empty list.
        """
        rows = conn.execute(
            "SELECT id, name, email, phone, address FROM contacts"
        ).fetchall()
        return [cls._row_to_contact_read(row) for row in rows]

    @classmethod
    async def create_contact(cls, conn: sqlite3.Connection, data: ContactCreate) -> ContactRead:
        """Insert a contact and return the row as stored.

        Field values are bound verbatim.  A ``None`` value hits the
        table's ``NOT NULL`` constraint and raises
        ``sqlite3.IntegrityError``; numbers come back as text through
        the columns' TEXT affinity.  ``RETURNING`` (SQLite 3.35+) keeps
        this a single statement.
        """
        row = conn.execute(
            """
            INSERT INTO contacts (name, email, phone, address)
            VALUES (?, ?, ?, ?)
            RETURNING id, name, email, phone, address
            """,
            (data.name, data.email, data.phone, data.address),
        ).fetchone()
        conn.commit()
        logger.info("Created contact %s", row["id"])
        return cls._row_to_contact_read(row)

    @staticmethod
    def _row_to_contact_read(row: sqlite3.Row) -> ContactRead:
        """Convert a database row to a ContactRead schema instance."""
        return ContactRead(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            phone=row["phone"],
            address=row["address"],
        )
