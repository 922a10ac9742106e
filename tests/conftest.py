"""Pytest configuration and fixtures for the permit admin.

Environment is set before app.main is imported: an in-memory SQLite store,
a test JWT secret, one allow-listed admin and no rate limiting. Each test
gets a fresh schema (the engine is disposed afterwards, which drops the
in-memory database).
"""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["JWT_SECRET"] = "test-jwt-secret-with-enough-length"
os.environ["ADMIN_EMAILS"] = "admin@example.com, Second.Admin@example.com"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DEV_BYPASS_AUTH"] = "false"
os.environ["ENVIRONMENT"] = "test"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from app.core.config import get_settings  # noqa: E402

get_settings.cache_clear()

from app.infrastructure.persistence import database  # noqa: E402
from app.infrastructure.persistence.models import (  # noqa: E402, F401
    PermitRule,
    RequiredDocument,
)
from app.infrastructure.security.jwt import create_access_token  # noqa: E402
from app.main import app  # noqa: E402

ADMIN_EMAIL = "admin@example.com"


@pytest.fixture(autouse=True)
async def store():
    """Create the schema on a fresh in-memory database; dispose it after the test."""
    get_settings.cache_clear()
    database._ensure_engine()
    async with database.engine.begin() as conn:
        await conn.run_sync(database.Base.metadata.create_all)
    yield
    await database.dispose_engine()
    get_settings.cache_clear()


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_session() -> AsyncSession:
    """Database session for repository tests. Commits are up to the test."""
    async with database.AsyncSessionLocal() as session:
        yield session


@pytest.fixture
def bearer_for():
    """Return a function building Authorization headers for an email."""

    def _bearer(email: str, sub: str = "user-1") -> dict[str, str]:
        token = create_access_token({"sub": sub, "email": email})
        return {"Authorization": f"Bearer {token}"}

    return _bearer


@pytest.fixture
def auth_headers(bearer_for) -> dict[str, str]:
    """Bearer token for the allow-listed admin."""
    return bearer_for(ADMIN_EMAIL)


@pytest.fixture
def permit_rule_payload() -> dict:
    return {
        "permit_type": "work_permit",
        "title": "Valid passport",
        "rule": "Passport must be valid for at least 12 months.",
        "category": "identity",
        "is_required": True,
    }


@pytest.fixture
def required_document_payload() -> dict:
    return {
        "permit_type": "work_permit",
        "document_name": "Employment contract",
        "required_for": "both",
        "is_mandatory": True,
        "condition": None,
        "description": "Signed by both parties",
        "sort_order": 1,
        "is_active": True,
        "validation_rules": {"formats": ["pdf"], "max_size_mb": 5},
    }
