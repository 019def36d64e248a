"""
HTTP contract tests for the contact endpoints.
"""

from fastapi.testclient import TestClient

from address_book_api.app.core.config import settings
from address_book_api.app.main import app

from .conftest import JANE


class TestListContacts:

    def test_empty_store_returns_empty_list(self, client):
        response = client.get("/api/contacts")
        assert response.status_code == 200
        assert response.json() == []

    def test_lists_created_contacts(self, client):
        created = client.post("/api/contacts", json=JANE).json()
        response = client.get("/api/contacts")
        assert response.status_code == 200
        assert created in response.json()

    def test_list_is_superset_after_create(self, client):
        first = client.post("/api/contacts", json=JANE).json()
        before = client.get("/api/contacts").json()
        second = client.post(
            "/api/contacts",
            json={"name": "John Roe", "email": "john@example.com", "phone": "555-9876", "address": "2 Side St"},
        ).json()
        after = client.get("/api/contacts").json()
        assert first in after
        assert second in after
        assert all(item in after for item in before)


class TestCreateContact:

    def test_create_returns_record_with_id(self, client):
        response = client.post("/api/contacts", json=JANE)
        assert response.status_code == 200
        body = response.json()
        assert isinstance(body["id"], int)
        assert {k: v for k, v in body.items() if k != "id"} == JANE

    def test_ids_are_unique(self, client):
        ids = [client.post("/api/contacts", json=JANE).json()["id"] for _ in range(5)]
        assert len(set(ids)) == 5

    def test_missing_field_is_store_constraint_error(self, client):
        payload = {k: v for k, v in JANE.items() if k != "email"}
        response = client.post("/api/contacts", json=payload)
        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "IntegrityError"
        assert "NOT NULL" in body["message"]
        assert "contacts.email" in body["message"]

    def test_failed_create_persists_nothing(self, client):
        client.post("/api/contacts", json={"name": "Only Name"})
        assert client.get("/api/contacts").json() == []

    def test_empty_strings_are_stored_verbatim(self, client):
        payload = {"name": "", "email": "", "phone": "", "address": ""}
        response = client.post("/api/contacts", json=payload)
        assert response.status_code == 200
        assert response.json()["name"] == ""

    def test_numeric_value_is_stored_as_text(self, client):
        response = client.post("/api/contacts", json=dict(JANE, phone=5551234))
        assert response.status_code == 200
        created = response.json()
        assert created["phone"] == "5551234"
        assert created in client.get("/api/contacts").json()

    def test_unbindable_value_is_store_error(self, client):
        response = client.post("/api/contacts", json=dict(JANE, address=["1 Main St"]))
        assert response.status_code == 500
        assert set(response.json()) == {"error", "message", "code"}
        assert client.get("/api/contacts").json() == []


class TestStoreFailure:

    def test_unreachable_store_on_list(self, unreachable_client):
        response = unreachable_client.get("/api/contacts")
        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "OperationalError"
        assert body["message"]

    def test_unreachable_store_on_create(self, unreachable_client):
        response = unreachable_client.post("/api/contacts", json=JANE)
        assert response.status_code == 500
        assert "id" not in response.json()

    def test_closed_connection_returns_error_body(self, closed_store_client):
        response = closed_store_client.get("/api/contacts")
        assert response.status_code == 500
        assert response.json()["error"] == "ProgrammingError"

    def test_unencodable_string_returns_error_body(self, client):
        raw = b'{"name": "\\ud800", "email": "jane@example.com", "phone": "555-1234", "address": "1 Main St"}'
        response = client.post(
            "/api/contacts", content=raw, headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "UnicodeEncodeError"
        assert "surrogates not allowed" in body["message"]
        assert client.get("/api/contacts").json() == []


def test_only_contact_routes_are_exposed(client):
    assert client.get("/api/contacts/1").status_code == 404
    assert client.delete("/api/contacts").status_code == 405


def test_startup_applies_migrations(monkeypatch, tmp_path):
    path = str(tmp_path / "startup.db")
    monkeypatch.setattr(settings, "database_url", path)
    with TestClient(app) as started:
        response = started.get("/api/contacts")
    assert response.status_code == 200
    assert response.json() == []
