"""Admin API client: candidate base URLs, failover, and working-URL caching.

Used by app.application.services.entity_operations and scripts/check_api.py.
"""

from app.infrastructure.external.admin_api.client import (
    UNREACHABLE_STATUS,
    AdminApiClient,
    AdminApiError,
    build_admin_api_client,
    get_admin_api_client,
)
from app.infrastructure.external.admin_api.endpoints import (
    DeploymentContext,
    build_candidate_urls,
)

__all__ = [
    "UNREACHABLE_STATUS",
    "AdminApiClient",
    "AdminApiError",
    "DeploymentContext",
    "build_admin_api_client",
    "build_candidate_urls",
    "get_admin_api_client",
]
