"""
Tests for the HTTP API.

Exercises routes end to end through TestClient: success paths, the error
envelope produced by the responder and the production masking contract.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.domain.errors import Failure, FailureError
from app.infrastructure.accounts.jwt_token_service import JwtTokenService


def register(client: TestClient, payload: dict) -> dict:
    response = client.post("/api/users", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def login(client: TestClient, email: str, password: str) -> str:
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["access_token"]


class TestSystemEndpoints:
    """Tests for service status, welcome, system info and simulated errors."""

    def test_service_status(self, client: TestClient) -> None:
        response = client.get("/api")
        assert response.status_code == 200
        assert response.json() == {"status": "OK", "message": "Service is running"}

    def test_welcome(self, client: TestClient) -> None:
        body = client.get("/api/welcome").json()
        assert body["message"] == "Welcome to the API"
        assert body["environment"] == "test"
        assert body["documentation"] is None

    def test_system_info(self, client: TestClient) -> None:
        body = client.get("/api/system").json()
        assert body["environment"] == "test"
        assert body["uptime_seconds"] >= 0
        assert body["python_version"]

    def test_simulated_error_in_test_environment(self, client: TestClient) -> None:
        response = client.get("/api/errors/simulate")
        body = response.json()
        assert response.status_code == 500
        assert body["status"] == "error"
        assert body["message"] == "Simulated server error for testing purposes"
        assert body["errorDetail"]["kind"] == "unclassified"

    def test_simulated_error_in_production(self, production_client: TestClient) -> None:
        response = production_client.get("/api/errors/simulate")
        assert response.status_code == 500
        assert response.json() == {"status": "error", "message": "Internal Server Error"}


class TestUsers:
    """Tests for POST /api/users and GET /api/users/{user_id}."""

    def test_create_user(self, client: TestClient, valid_user: dict) -> None:
        body = register(client, valid_user)
        assert body["name"] == "Juan Perez"
        assert body["email"] == "juan@example.com"
        assert "password" not in body
        assert "password_hash" not in body

    def test_create_user_validation_errors(self, client: TestClient) -> None:
        response = client.post(
            "/api/users", json={"name": "A", "email": "juan@example.com", "password": "Secure123"}
        )
        assert response.status_code == 400
        body = response.json()
        assert body["status"] == "fail"
        assert body["message"] == "Name must be between 2 and 50 characters long"
        assert body["errors"] == [
            {"field": "name", "message": "Name must be between 2 and 50 characters long"}
        ]

    def test_create_user_reports_all_violations(self, client: TestClient) -> None:
        response = client.post("/api/users", json={})
        body = response.json()
        assert response.status_code == 400
        assert [e["field"] for e in body["errors"]] == [
            "email",
            "password",
            "password",
            "name",
            "name",
        ]

    def test_name_is_trimmed_before_validation(self, client: TestClient, valid_user: dict) -> None:
        response = client.post("/api/users", json={**valid_user, "name": "  A  "})
        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"field": "name", "message": "Name must be between 2 and 50 characters long"}
        ]

    def test_stored_name_is_trimmed(self, client: TestClient, valid_user: dict) -> None:
        body = register(client, {**valid_user, "name": "  Juan Perez "})
        assert body["name"] == "Juan Perez"

    def test_duplicate_email(self, client: TestClient, valid_user: dict) -> None:
        register(client, valid_user)
        response = client.post("/api/users", json={**valid_user, "email": "JUAN@example.com"})
        assert response.status_code == 400
        assert response.json()["message"] == "Duplicate field value entered"

    def test_body_must_be_an_object(self, client: TestClient) -> None:
        response = client.post("/api/users", json=["not", "an", "object"])
        assert response.status_code == 400
        assert response.json()["status"] == "fail"

    def test_malformed_json(self, client: TestClient) -> None:
        response = client.post(
            "/api/users", content=b"{bad json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json()["errorDetail"]["kind"] == "validation"

    def test_get_user(self, client: TestClient, valid_user: dict) -> None:
        created = register(client, valid_user)
        response = client.get(f"/api/users/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_get_user_invalid_id(self, client: TestClient) -> None:
        response = client.get("/api/users/not-a-uuid")
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid ID format"

    def test_get_user_unknown(self, client: TestClient) -> None:
        response = client.get(f"/api/users/{uuid4()}")
        assert response.status_code == 404
        assert response.json()["message"] == "User not found"


class TestAuthentication:
    """Tests for login and the protected endpoint."""

    def test_login_and_access_protected(self, client: TestClient, valid_user: dict) -> None:
        created = register(client, valid_user)
        token = login(client, "juan@example.com", valid_user["password"])

        response = client.get("/api/protected", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        assert response.json() == {
            "message": "Access granted",
            "user": {"id": created["id"], "email": "juan@example.com"},
        }

    def test_login_wrong_password(self, client: TestClient, valid_user: dict) -> None:
        register(client, valid_user)
        response = client.post(
            "/api/auth/login", json={"email": valid_user["email"], "password": "Wrong1234"}
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid email or password"

    def test_login_validation(self, client: TestClient) -> None:
        response = client.post("/api/auth/login", json={"email": "nope"})
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid email format, Password is required"

    def test_missing_token(self, client: TestClient) -> None:
        response = client.get("/api/protected")
        assert response.status_code == 401
        assert response.json()["status"] == "fail"
        assert response.json()["message"] == "Access token required"

    def test_malformed_token(self, client: TestClient) -> None:
        response = client.get("/api/protected", headers={"Authorization": "Bearer abc.def"})
        body = response.json()
        assert response.status_code == 401
        assert body["status"] == "fail"
        assert body["message"] == "Invalid token"

    def test_token_signed_with_other_secret(
        self, client: TestClient, make_settings, valid_user: dict
    ) -> None:
        created = register(client, valid_user)
        other = JwtTokenService(make_settings(jwt_secret="another-secret-of-sufficient-length").security)
        user = client.app.state.user_repository.get(UUID(created["id"]))
        response = client.get(
            "/api/protected", headers={"Authorization": f"Bearer {other.issue(user)}"}
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid token"

    def test_expired_token(self, app: FastAPI, valid_user: dict) -> None:
        client = TestClient(app)
        created = register(client, valid_user)
        settings = app.state.settings
        past = JwtTokenService(
            settings.security,
            clock=lambda: datetime.now(timezone.utc) - timedelta(seconds=settings.jwt_expiration + 60),
        )
        user = app.state.user_repository.get(UUID(created["id"]))

        response = client.get("/api/protected", headers={"Authorization": f"Bearer {past.issue(user)}"})

        assert response.status_code == 401
        assert response.json()["message"] == "Token expired"


class TestProducts:
    """Tests for the catalog endpoints."""

    def test_create_and_get_product(self, client: TestClient) -> None:
        response = client.post(
            "/api/products",
            json={"name": "Desk Lamp", "price": 19.99, "category": "Home"},
        )
        assert response.status_code == 201
        created = response.json()
        assert created["description"] is None

        fetched = client.get(f"/api/products/{created['id']}").json()
        assert fetched == created

    def test_product_validation(self, client: TestClient) -> None:
        response = client.post(
            "/api/products",
            json={"name": "La", "price": -5, "category": "Home", "description": "x" * 501},
        )
        assert response.status_code == 400
        assert [e["field"] for e in response.json()["errors"]] == ["name", "price", "description"]

    def test_name_is_trimmed_before_validation(self, client: TestClient) -> None:
        response = client.post(
            "/api/products", json={"name": "  a ", "price": 1, "category": "Home"}
        )
        assert response.status_code == 400
        assert [e["field"] for e in response.json()["errors"]] == ["name"]

    def test_stored_fields_are_trimmed(self, client: TestClient) -> None:
        response = client.post(
            "/api/products", json={"name": " Desk Lamp  ", "price": 1, "category": " Home "}
        )
        assert response.status_code == 201
        assert (response.json()["name"], response.json()["category"]) == ("Desk Lamp", "Home")

    def test_huge_price_is_a_validation_failure(self, client: TestClient) -> None:
        response = client.post(
            "/api/products", json={"name": "Lamp", "price": 10**400, "category": "Home"}
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Price must be a positive number"

    def test_duplicate_product_name(self, client: TestClient) -> None:
        payload = {"name": "Desk Lamp", "price": "10", "category": "Home"}
        assert client.post("/api/products", json=payload).status_code == 201
        response = client.post("/api/products", json={**payload, "name": "desk lamp"})
        assert response.status_code == 400
        assert response.json()["message"] == "Duplicate field value entered"

    def test_get_product_invalid_id(self, client: TestClient) -> None:
        response = client.get("/api/products/123")
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid ID format"


class TestRoutingErrors:
    """Errors raised by the framework go through the same responder."""

    def test_unknown_route(self, client: TestClient) -> None:
        response = client.get("/api/does-not-exist")
        assert response.status_code == 404
        assert response.json()["message"] == "Route not found"
        assert response.json()["status"] == "fail"

    def test_method_not_allowed(self, client: TestClient) -> None:
        response = client.delete("/api")
        assert response.status_code == 405
        assert response.json()["message"] == "Method not allowed"

    def test_raised_failure_error(self, make_app) -> None:
        app = make_app()

        @app.get("/conflict")
        def conflict() -> None:
            raise FailureError(Failure.duplicate_key("name already taken"))

        response = TestClient(app).get("/conflict")

        assert response.status_code == 400
        assert response.json()["message"] == "Duplicate field value entered"

    @pytest.mark.parametrize("environment", ["development", "production"])
    def test_unexpected_exception(self, make_app, environment: str) -> None:
        app = make_app(environment=environment)

        @app.get("/boom")
        def boom() -> None:
            raise RuntimeError("database password=hunter2")

        response = TestClient(app, raise_server_exceptions=False).get("/boom")
        body = response.json()

        assert response.status_code == 500
        assert body["status"] == "error"
        if environment == "production":
            assert body == {"status": "error", "message": "Internal Server Error"}
            assert "hunter2" not in response.text
        else:
            assert body["message"] == "database password=hunter2"
            assert "RuntimeError" in body["stackTrace"]
