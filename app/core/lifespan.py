"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring: verify the entity store engine can
be created on startup and dispose it on shutdown.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.infrastructure.persistence import database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit dispose the SQL engine."""
    settings = get_settings()

    # ---- Startup ----
    database._ensure_engine()
    if database.engine is None:
        logger.warning("DATABASE_URL not set; /api routes will answer 503")
    if settings.dev_bypass_auth:
        logger.warning(
            "DEV_BYPASS_AUTH is enabled: every request acts as %s",
            settings.dev_user_email,
        )
    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    # ---- Shutdown ----
    await database.dispose_engine()
