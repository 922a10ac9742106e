"""FastAPI dependencies (composition root): access gate, admin identity, repositories."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services.access_gate import AccessGate
from app.core.config import get_settings
from app.domain.exceptions import AuthenticationException
from app.infrastructure.persistence.database import get_db, get_db_transactional
from app.infrastructure.persistence.repositories import (
    PermitRuleRepository,
    RequiredDocumentRepository,
)
from app.infrastructure.security.jwt import verify_token
from app.shared.context import set_current_admin
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

_bearer = HTTPBearer(auto_error=False)


def get_access_gate() -> AccessGate:
    """Access gate over ADMIN_EMAILS."""
    return AccessGate(get_settings().admin_email_list)


async def require_admin(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer)],
    gate: Annotated[AccessGate, Depends(get_access_gate)],
) -> str:
    """Return the admin email for this request.

    Identity is the ``email`` claim of the bearer token, or DEV_USER_EMAIL when
    DEV_BYPASS_AUTH is on. Either way the email must be on the allow-list.

    Raises:
        AuthenticationException: Missing or invalid token (401).
        AuthorizationException: Email not on the allow-list (403).
    """
    settings = get_settings()
    if settings.dev_bypass_auth:
        email = settings.dev_user_email
    else:
        if credentials is None:
            raise AuthenticationException("Missing bearer token")
        try:
            payload = verify_token(credentials.credentials)
        except ValueError as e:
            logger.info("Rejected admin token: %s", e)
            raise AuthenticationException("Invalid or expired token") from e
        email = payload["email"]
    if not gate.is_admin(email):
        logger.warning("Access denied for %s", email)
    admin = gate.require_admin(email)
    set_current_admin(admin)
    return admin


async def get_permit_rule_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PermitRuleRepository:
    return PermitRuleRepository(db)


async def get_permit_rule_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> PermitRuleRepository:
    return PermitRuleRepository(db)


async def get_required_document_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> RequiredDocumentRepository:
    return RequiredDocumentRepository(db)


async def get_required_document_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> RequiredDocumentRepository:
    return RequiredDocumentRepository(db)
