"""Integration tests for the account registration endpoint."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from identity.account.account import Account
from identity.api import router
from protean import current_domain
from protean.integrations.fastapi import register_exception_handlers
from shared.errors import register_error_handlers


@pytest.fixture()
def client():
    app = FastAPI()
    register_exception_handlers(app)
    register_error_handlers(app)
    app.include_router(router)
    return TestClient(app)


def _payload(**overrides):
    payload = {
        "username": "ada",
        "password": "analytical-engine",
        "email": "ada@example.com",
        "role": "customer",
    }
    payload.update(overrides)
    return payload


class TestRegisterAccountEndpoint:
    def test_register(self, client):
        response = client.post("/api/account", json=_payload())

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "Registered account successfully"

        account = current_domain.repository_for(Account).get(data["account_id"])
        assert account.username == "ada"

    def test_register_admin(self, client):
        response = client.post("/api/account", json=_payload(username="root", role="admin"))

        assert response.status_code == 201
        account = current_domain.repository_for(Account).get(response.json()["account_id"])
        assert account.role == "admin"

    def test_duplicate_username_is_409(self, client):
        client.post("/api/account", json=_payload())

        response = client.post("/api/account", json=_payload(email="ada2@example.com"))

        assert response.status_code == 409
        assert response.json() == {"detail": "Email or username already exists"}

    def test_invalid_email_is_400(self, client):
        response = client.post("/api/account", json=_payload(email="ada@localhost"))
        assert response.status_code == 400

    def test_unknown_role_is_400(self, client):
        response = client.post("/api/account", json=_payload(role="barista"))
        assert response.status_code == 400

    def test_missing_password_is_400(self, client):
        payload = _payload()
        del payload["password"]

        response = client.post("/api/account", json=payload)

        assert response.status_code == 400


class TestRegistrationRunsOffTheEventLoop:
    def test_route_is_synchronous(self):
        import inspect

        from identity.api.routes import register_account

        assert not inspect.iscoroutinefunction(register_account)
