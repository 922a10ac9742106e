"""Health endpoints: liveness, entity store check, configuration diagnostics."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from app.api.dependencies import require_admin
from app.core.config import get_settings
from app.infrastructure.external.admin_api import (
    DeploymentContext,
    build_candidate_urls,
)
from app.infrastructure.persistence import database
from app.infrastructure.persistence.models import PermitRule, RequiredDocument
from app.schemas.health import (
    DatabaseHealthResponse,
    DiagnosticsResponse,
    HealthResponse,
)
from app.shared.telemetry.logging import get_logger
from app.shared.utils.datetime import utc_now

logger = get_logger(__name__)

router = APIRouter()

_CHECKED_TABLES = (PermitRule, RequiredDocument)


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse(service=get_settings().app_name, timestamp=utc_now())


@router.get(
    "/db",
    response_model=DatabaseHealthResponse,
    responses={503: {"description": "Store not configured or a table query failed"}},
)
async def database_health() -> DatabaseHealthResponse | JSONResponse:
    """Count rows in each admin table; 503 unless every query succeeds."""
    database._ensure_engine()
    services: dict[str, bool] = {}
    if database.AsyncSessionLocal is None:
        status = "not_configured"
    else:
        async with database.AsyncSessionLocal() as session:
            for model in _CHECKED_TABLES:
                table = model.__tablename__
                try:
                    await session.execute(select(func.count()).select_from(model))
                    services[table] = True
                except SQLAlchemyError as e:
                    logger.error("Health query on %s failed: %s", table, e)
                    await session.rollback()
                    services[table] = False
        status = "ok" if all(services.values()) else "degraded"

    passed = bool(services) and all(services.values())
    body = DatabaseHealthResponse(
        status=status,
        database="connected" if passed else "unavailable",
        services=services,
        all_tests_passed=passed,
        timestamp=utc_now(),
    )
    if passed:
        return body
    return JSONResponse(
        status_code=503, content=body.model_dump(mode="json", by_alias=True)
    )


@router.get(
    "/diagnostics",
    response_model=DiagnosticsResponse,
)
def diagnostics(
    _admin: Annotated[str, Depends(require_admin)],
) -> DiagnosticsResponse:
    """Report which settings are present (never their values) and the client's candidate URLs."""
    settings = get_settings()
    config = {
        "database_url": bool(settings.database_url),
        "jwt_secret": bool(settings.jwt_secret.get_secret_value()),
        "admin_emails": bool(settings.admin_email_list),
        "api_url": bool(settings.api_url),
        "internal_api_url": bool(settings.internal_api_url),
        "public_api_url": bool(settings.public_api_url),
        "admin_api_token": settings.admin_api_token is not None,
    }
    warnings: list[str] = []
    if not config["database_url"]:
        warnings.append("DATABASE_URL is not set; /api routes answer 503")
    if not config["admin_emails"]:
        warnings.append("ADMIN_EMAILS is empty; every identity is refused")
    if settings.dev_bypass_auth:
        warnings.append(f"DEV_BYPASS_AUTH is on; requests act as {settings.dev_user_email}")
    if not (config["api_url"] or config["internal_api_url"] or config["public_api_url"]):
        warnings.append("No admin API URL configured; the client uses local and default URLs")
    return DiagnosticsResponse(
        environment=settings.environment,
        config=config,
        candidate_api_urls=build_candidate_urls(DeploymentContext.from_settings(settings)),
        warnings=warnings,
        timestamp=utc_now(),
    )
