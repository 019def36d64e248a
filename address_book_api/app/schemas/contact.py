"""
Pydantic models for contact records.

``ContactCreate`` deliberately accepts any JSON value for every field:
presence and type are left to the ``contacts`` table, not the API.  A
missing field surfaces as a ``NOT NULL`` store error, a number is
stored as text by the column's TEXT affinity, and a value the driver
cannot bind (a list or object) fails as a store error.
"""

from typing import Any

from pydantic import BaseModel, Field


class ContactCreate(BaseModel):
    """Schema for creating a contact."""

    name: Any = Field(None, examples=["Jane Doe"])
    email: Any = Field(None, examples=["jane@example.com"])
    phone: Any = Field(None, examples=["555-1234"])
    address: Any = Field(None, examples=["1 Main St"])


class ContactRead(BaseModel):
    """Schema for a stored contact, including its store-assigned ``id``."""

    id: int
    name: str
    email: str
    phone: str
    address: str

    model_config = {
        "from_attributes": True,
    }
