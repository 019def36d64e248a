"""
Top‑level package for the Address Book API.

The server application lives under ``app``; the HTTP client used by
front ends and the command line tool live in ``client``, ``views``
and ``cli``.  Importing the package itself has no side effects so that
the client can be used without pulling in FastAPI.
"""

__all__ = []
