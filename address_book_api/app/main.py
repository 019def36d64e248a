"""
Main entrypoint for the Address Book API.

This module assembles the FastAPI application: logging, CORS, the
store error handlers and the API router.  ``create_app`` builds the
app, which is then instantiated at module import time as ``app``::

    uvicorn address_book_api.app.main:app --reload
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router as api_router
from .core.config import settings
from .core.db import init_db
from .core.errors import STORE_ERRORS, store_error_handler
from .core.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Creates the database file if needed and applies migrations.
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that startup can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for exc_class in STORE_ERRORS:
        app.add_exception_handler(exc_class, store_error_handler)

    app.include_router(api_router, prefix=settings.api_prefix)

    return app


app = create_app()
