"""
API package containing the HTTP routes.

``router.py`` exposes a top‑level ``router`` that aggregates the
domain routers found in ``endpoints``.
"""
