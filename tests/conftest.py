"""
Shared fixtures.

Every test gets its own SQLite file under ``tmp_path``.  The API is
pointed at it by overriding the ``get_db`` dependency, so the real
``settings.database_url`` is never touched.
"""

import sqlite3

import pytest
from fastapi.testclient import TestClient

from address_book_api.app.core.db import get_connection, get_db, init_db
from address_book_api.app.main import app


JANE = {
    "name": "Jane Doe",
    "email": "jane@example.com",
    "phone": "555-1234",
    "address": "1 Main St",
}


@pytest.fixture
def db_path(tmp_path):
    path = str(tmp_path / "contacts.db")
    init_db(path)
    return path


@pytest.fixture
def conn(db_path):
    connection = get_connection(db_path)
    yield connection
    connection.close()


@pytest.fixture
def client(db_path):
    def override_get_db():
        connection = get_connection(db_path)
        try:
            yield connection
        finally:
            connection.close()

    app.dependency_overrides[get_db] = override_get_db
    # Not used as a context manager: startup would run init_db() against
    # the configured database instead of the per-test file.
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def unreachable_client(tmp_path):
    missing = str(tmp_path / "no-such-dir" / "contacts.db")

    def override_get_db():
        connection = get_connection(missing)
        try:
            yield connection
        finally:
            connection.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def closed_store_client(tmp_path):
    def override_get_db():
        connection = sqlite3.connect(str(tmp_path / "closed.db"), check_same_thread=False)
        connection.close()
        yield connection

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
