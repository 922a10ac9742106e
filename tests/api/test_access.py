"""Access gate on the admin routes: 401 without identity, 403 off the allow-list."""

import pytest
from httpx import AsyncClient

from app.core.config import get_settings


async def test_missing_token_returns_401(client: AsyncClient) -> None:
    response = await client.get("/api/permit-rules")
    assert response.status_code == 401
    assert response.json()["code"] == "AUTHENTICATION_ERROR"
    assert response.headers["WWW-Authenticate"] == "Bearer"


async def test_invalid_token_returns_401(client: AsyncClient) -> None:
    response = await client.get(
        "/api/required-documents", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert response.status_code == 401
    assert response.json()["error"] == "Invalid or expired token"


async def test_email_not_on_allow_list_returns_403(
    client: AsyncClient, bearer_for
) -> None:
    response = await client.get(
        "/api/permit-rules", headers=bearer_for("someone@example.com")
    )
    assert response.status_code == 403
    body = response.json()
    assert body["code"] == "AUTHORIZATION_ERROR"
    assert body["details"] == {"email": "someone@example.com"}


async def test_allow_list_is_case_insensitive(client: AsyncClient, bearer_for) -> None:
    response = await client.get(
        "/api/permit-rules", headers=bearer_for("second.admin@EXAMPLE.com")
    )
    assert response.status_code == 200


async def test_write_routes_are_gated(
    client: AsyncClient, bearer_for, permit_rule_payload: dict
) -> None:
    """No write reaches the store for a non-admin."""
    outsider = bearer_for("outsider@example.com")
    response = await client.post("/api/permit-rules", json=permit_rule_payload, headers=outsider)
    assert response.status_code == 403

    admin = bearer_for("admin@example.com")
    listing = await client.get("/api/permit-rules", headers=admin)
    assert listing.json() == []


@pytest.fixture
def dev_bypass(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("DEV_BYPASS_AUTH", "true")
    monkeypatch.setenv("DEV_USER_EMAIL", "admin@example.com")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


async def test_dev_bypass_acts_as_dev_user(client: AsyncClient, dev_bypass) -> None:
    response = await client.get("/api/permit-rules")
    assert response.status_code == 200


async def test_dev_bypass_still_checks_allow_list(
    client: AsyncClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("DEV_BYPASS_AUTH", "true")
    monkeypatch.setenv("DEV_USER_EMAIL", "dev@localhost.com")
    get_settings.cache_clear()
    response = await client.get("/api/permit-rules")
    assert response.status_code == 403
