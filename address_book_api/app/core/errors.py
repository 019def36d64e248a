"""
Store error reporting.

Any store failure escaping a route (including failures to open the
connection) is answered with HTTP 500 and the error itself serialized
in the body.  Errors are not retried or translated.

Besides ``sqlite3.Error`` this covers ``UnicodeEncodeError``, which the
driver raises while binding a string it cannot encode as UTF-8 (for
example a lone surrogate).
"""

import logging
import sqlite3
from typing import Any, Dict, Tuple, Type

from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

STORE_ERRORS: Tuple[Type[Exception], ...] = (sqlite3.Error, UnicodeEncodeError)


def store_error_body(exc: Exception) -> Dict[str, Any]:
    """Serialize a store exception as a plain dict."""
    return {
        "error": type(exc).__name__,
        "message": str(exc),
        # sqlite_errorname is only set by Python 3.11+ and only for some errors
        "code": getattr(exc, "sqlite_errorname", None),
    }


async def store_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Store operation failed for %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=store_error_body(exc),
    )
