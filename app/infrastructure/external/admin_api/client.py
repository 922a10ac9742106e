"""Admin API HTTP client with candidate-URL failover.

All HTTP calls use httpx.AsyncClient so they do not block the event loop.

Failover policy:
- A network-level failure (connection refused, DNS, timeout) moves on to the
  next candidate base URL.
- Any HTTP response that is not 2xx is final: the service answered, so the
  failure is an application error and no other candidate is tried.
- Any other httpx failure (body that cannot be decoded, too many redirects,
  invalid URL) is final as well and surfaces as AdminApiError with status 0.
- The first base URL that answers successfully is cached on the client and is
  the only one tried afterwards. The cache never expires; if that address
  later becomes unreachable, calls fail with status 0 until a new client is
  built.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from functools import lru_cache
from typing import Any

import httpx

from app.core.config import get_settings
from app.infrastructure.external.admin_api.endpoints import (
    DeploymentContext,
    build_candidate_urls,
)
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

# Status carried by AdminApiError when no usable response was received.
UNREACHABLE_STATUS = 0


class AdminApiError(Exception):
    """Terminal failure of an admin API call.

    Attributes:
        message: Error message from the response body, response text, or network error.
        status: HTTP status code; 0 when no usable response was received.
        endpoint: Request path that was attempted (e.g. /api/permit-rules/42).
    """

    def __init__(self, message: str, status: int, endpoint: str) -> None:
        self.message = message
        self.status = status
        self.endpoint = endpoint
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"AdminApiError(status={self.status!r}, endpoint={self.endpoint!r}, "
            f"message={self.message!r})"
        )


def _error_message(response: httpx.Response) -> str:
    """Best-effort message: JSON ``error`` field, else body text, else ``HTTP <status>``."""
    text = response.text
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return text or f"HTTP {response.status_code}"


class AdminApiClient:
    """Client for the permit admin API.

    Owns the cached working base URL. Build one per process (see
    get_admin_api_client) or inject one where tests need isolation.
    """

    def __init__(
        self,
        candidate_urls: Sequence[str],
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
        default_headers: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            candidate_urls: Base URLs in priority order (see build_candidate_urls).
            http_client: Shared httpx client; when omitted one is created and owned.
            timeout: Per-request timeout in seconds for an owned http client.
            default_headers: Headers sent with every request (e.g. Authorization).
        """
        if not candidate_urls:
            raise ValueError("AdminApiClient needs at least one candidate base URL")
        self._candidate_urls = tuple(candidate_urls)
        self._working_base_url: str | None = None
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout)
        self._headers = {"Content-Type": "application/json", **(default_headers or {})}

    @classmethod
    def from_context(
        cls, context: DeploymentContext, **kwargs: Any
    ) -> "AdminApiClient":
        """Build a client whose candidates come from a DeploymentContext."""
        return cls(build_candidate_urls(context), **kwargs)

    @property
    def candidate_urls(self) -> tuple[str, ...]:
        return self._candidate_urls

    @property
    def working_base_url(self) -> str | None:
        """Base URL that last answered successfully, or None before the first success."""
        return self._working_base_url

    async def request(
        self,
        path: str,
        method: str = "GET",
        *,
        json: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body (None for 204).

        Args:
            path: Path relative to the base URL, starting with '/'.
            method: HTTP method.
            json: Optional JSON-serializable body.
            headers: Extra headers merged over the defaults.

        Raises:
            AdminApiError: Non-2xx response (its status), undecodable success
                body (its status), any other httpx failure such as a corrupt
                content encoding or a redirect loop (status 0, no failover),
                or every candidate unreachable (status 0).
        """
        bases = (
            [self._working_base_url]
            if self._working_base_url is not None
            else list(self._candidate_urls)
        )
        merged_headers = {**self._headers, **(headers or {})}
        last_network_error: str | None = None

        for base in bases:
            url = f"{base}{path}"
            logger.debug("Admin API %s %s", method, url)
            try:
                response = await self._http.request(
                    method, url, json=json, headers=merged_headers
                )
            except httpx.TransportError as exc:
                last_network_error = str(exc) or exc.__class__.__name__
                logger.debug(
                    "Admin API network error via %s for %s: %s",
                    base,
                    path,
                    last_network_error,
                )
                continue
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                # Host answered but the exchange is unusable (undecodable body,
                # redirect loop) or the URL is malformed: final, no failover.
                message = str(exc) or exc.__class__.__name__
                logger.warning(
                    "Admin API %s %s failed via %s: %s", method, path, base, message
                )
                raise AdminApiError(message, UNREACHABLE_STATUS, path) from exc

            if not response.is_success:
                message = _error_message(response)
                logger.warning(
                    "Admin API %s %s failed with HTTP %s: %s",
                    method,
                    path,
                    response.status_code,
                    message,
                )
                raise AdminApiError(message, response.status_code, path)

            self._remember(base)
            return self._decode(response, path)

        logger.error(
            "Admin API %s %s: no reachable base URL (tried %s)",
            method,
            path,
            ", ".join(bases),
        )
        raise AdminApiError(
            f"Network error: {last_network_error or 'no candidate base URL reachable'}",
            UNREACHABLE_STATUS,
            path,
        )

    async def get(self, path: str, **kwargs: Any) -> Any:
        return await self.request(path, "GET", **kwargs)

    async def post(self, path: str, **kwargs: Any) -> Any:
        return await self.request(path, "POST", **kwargs)

    async def put(self, path: str, **kwargs: Any) -> Any:
        return await self.request(path, "PUT", **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> Any:
        return await self.request(path, "DELETE", **kwargs)

    def _remember(self, base: str) -> None:
        if self._working_base_url != base:
            logger.info("Admin API base URL resolved to %s", base)
            self._working_base_url = base

    @staticmethod
    def _decode(response: httpx.Response, path: str) -> Any:
        if response.status_code == 204:
            return None
        try:
            return response.json()
        except ValueError:
            raise AdminApiError(
                response.text or f"HTTP {response.status_code}: invalid JSON body",
                response.status_code,
                path,
            ) from None

    async def aclose(self) -> None:
        """Close the http client if this instance created it."""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "AdminApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


def build_admin_api_client(
    *, server_side: bool = True, http_client: httpx.AsyncClient | None = None
) -> AdminApiClient:
    """Create a client from settings (candidate URLs, token, timeout)."""
    settings = get_settings()
    headers: dict[str, str] = {}
    if settings.admin_api_token is not None and settings.admin_api_token.get_secret_value():
        headers["Authorization"] = f"Bearer {settings.admin_api_token.get_secret_value()}"
    return AdminApiClient.from_context(
        DeploymentContext.from_settings(settings, server_side=server_side),
        http_client=http_client,
        timeout=settings.admin_api_timeout_seconds,
        default_headers=headers,
    )


@lru_cache
def get_admin_api_client() -> AdminApiClient:
    """Return the process-wide admin API client (one cached base URL per process)."""
    return build_admin_api_client()
