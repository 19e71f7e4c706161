"""Tests for the API exception handlers."""

from unittest.mock import AsyncMock

from fastapi.testclient import TestClient

from api.dependencies import get_account_service
from shared.exceptions import InternalError


class TestErrorHandlers:
    def test_unexpected_error_is_generic_500(self, app, caplog):
        """Unhandled exceptions never leak detail to the client."""
        service = AsyncMock()
        service.authenticate.side_effect = RuntimeError("relation \"users\" does not exist")
        app.dependency_overrides[get_account_service] = lambda: service
        client = TestClient(app, raise_server_exceptions=False)

        response = client.post("/api/login", json={"email": "a@b.com", "password": "pw"})

        assert response.status_code == 500
        assert response.json() == {"error": "INTERNAL_ERROR", "message": "Internal server error."}
        assert "relation" not in response.text
        assert "Unhandled error on POST /api/login" in caplog.text

    def test_internal_error_keeps_user_message(self, app, client):
        service = AsyncMock()
        service.create_account.side_effect = InternalError("Error creating account.")
        app.dependency_overrides[get_account_service] = lambda: service

        response = client.post("/api/create-account", json={"email": "a@b.com", "password": "pw"})

        assert response.status_code == 500
        assert response.json()["message"] == "Error creating account."

    def test_wrong_field_types_are_400(self, client):
        response = client.post("/api/login", json={"email": ["a@b.com"], "password": 1})
        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_REQUEST"

    def test_unknown_api_route_uses_error_shape(self, client):
        response = client.get("/api/nope")
        assert response.status_code == 404
        assert response.json() == {"error": "NOT_FOUND", "message": "Not Found"}

    def test_wrong_method_uses_error_shape(self, client):
        response = client.get("/api/login")
        assert response.status_code == 405
        assert response.json()["error"] == "METHOD_NOT_ALLOWED"
        assert "POST" in response.headers["allow"]
