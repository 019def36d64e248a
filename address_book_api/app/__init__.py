"""
Application package initializer.

The server is split into ``core`` (configuration, logging, database),
``schemas`` (request and response models), ``services`` (SQL against
the contact store) and ``api`` (HTTP routes).
"""

from .main import app  # noqa: F401
