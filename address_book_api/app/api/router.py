"""
Top‑level API router.

Aggregates the domain routers.  The shared path prefix is applied by
``create_app`` when this router is included.
"""

from fastapi import APIRouter

from .endpoints import contacts

router = APIRouter()

# The contacts router defines its own "/contacts" path internally.
router.include_router(contacts.router, tags=["contacts"])
