"""API router aggregation.

Admin resources live under /api; health endpoints under /health.
"""

from fastapi import APIRouter

from app.api.endpoints import health, permit_rules, required_documents
from app.core.constants import (
    HEALTH_PATH,
    PERMIT_RULES_PATH,
    REQUIRED_DOCUMENTS_PATH,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix=HEALTH_PATH, tags=["health"])
api_router.include_router(
    permit_rules.router, prefix=PERMIT_RULES_PATH, tags=["permit-rules"]
)
api_router.include_router(
    required_documents.router,
    prefix=REQUIRED_DOCUMENTS_PATH,
    tags=["required-documents"],
)
