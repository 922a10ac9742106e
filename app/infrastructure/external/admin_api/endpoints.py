"""Candidate base URLs for the admin API client.

The deployment context is resolved once, at client construction, from an
explicit DeploymentContext instead of probing the runtime. Server-side callers
see every configured address; browser-like callers (no access to internal
configuration) only see the public address.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from app.core.config import DEFAULT_PUBLIC_API_URL

if TYPE_CHECKING:
    from app.core.config import Settings


@dataclass(frozen=True)
class DeploymentContext:
    """Addresses available to this process, highest priority first.

    Attributes:
        server_side: False when internal/server-only configuration is unavailable.
        explicit_url: Explicit override address (API_URL).
        internal_url: Internal service-network address (INTERNAL_API_URL).
        public_url: Shared public-facing override (PUBLIC_API_URL).
        local_fallback_urls: Well-known local addresses (LOCAL_API_URLS).
        default_url: Hard-coded public default.
    """

    server_side: bool = True
    explicit_url: str | None = None
    internal_url: str | None = None
    public_url: str | None = None
    local_fallback_urls: tuple[str, ...] = field(default_factory=tuple)
    default_url: str = DEFAULT_PUBLIC_API_URL

    @classmethod
    def from_settings(
        cls, settings: "Settings", *, server_side: bool = True
    ) -> "DeploymentContext":
        """Build the context from application settings."""
        return cls(
            server_side=server_side,
            explicit_url=settings.api_url,
            internal_url=settings.internal_api_url,
            public_url=settings.public_api_url,
            local_fallback_urls=tuple(settings.local_api_url_list),
            default_url=settings.default_api_url or DEFAULT_PUBLIC_API_URL,
        )


def _normalize(url: str | None) -> str | None:
    """Strip whitespace and trailing slashes; empty becomes None."""
    if url is None:
        return None
    cleaned = url.strip().rstrip("/")
    return cleaned or None


def build_candidate_urls(context: DeploymentContext) -> list[str]:
    """Return the ordered, de-duplicated candidate base URLs for context.

    Order: explicit override, internal address, shared public override,
    local fallbacks, public default. A non-server context collapses to the
    single public address.
    """
    if not context.server_side:
        public = _normalize(context.public_url) or _normalize(context.default_url)
        return [public] if public else []

    ordered = [
        context.explicit_url,
        context.internal_url,
        context.public_url,
        *context.local_fallback_urls,
        context.default_url,
    ]
    candidates: list[str] = []
    for raw in ordered:
        url = _normalize(raw)
        if url and url not in candidates:
            candidates.append(url)
    return candidates
