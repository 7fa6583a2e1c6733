"""Tests for health endpoints and request context."""

from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from swimlog.api.app import create_app
from swimlog.api.dependencies import get_supabase


def _client_with_database(database: MagicMock) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_supabase] = lambda: database
    return TestClient(app)


class TestHealth:
    """Tests for /health and /health/ready."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_ready(self):
        database = MagicMock()
        response = _client_with_database(database).get("/health/ready")

        assert response.status_code == 200
        assert response.json()["database"] == "connected"
        database.table.assert_called_once_with("time_entries")

    def test_ready_database_unreachable(self):
        database = MagicMock()
        database.table.return_value.select.return_value.limit.return_value.execute.side_effect = (
            RuntimeError("connection refused")
        )

        response = _client_with_database(database).get("/health/ready")

        assert response.status_code == 503

    def test_ready_without_database(self, client_without_database):
        assert client_without_database.get("/health/ready").status_code == 503

    def test_times_without_database(self, client_without_database, swimmer_id):
        response = client_without_database.get("/api/v1/times", params={"swimmer_id": swimmer_id})
        assert response.status_code == 503


class TestRequestContext:
    """Tests for the request id header."""

    def test_generated_request_id(self, client):
        assert client.get("/health").headers["X-Request-ID"]

    def test_incoming_request_id_is_echoed(self, client):
        response = client.get("/health", headers={"X-Request-ID": "practice-42"})
        assert response.headers["X-Request-ID"] == "practice-42"
