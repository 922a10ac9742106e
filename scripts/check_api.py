"""Check that the admin API is reachable from this environment.

Resolves the candidate base URLs from settings (API_URL, INTERNAL_API_URL,
PUBLIC_API_URL, LOCAL_API_URLS, DEFAULT_API_URL), then calls /health through
the admin API client and reports which base URL answered.

Usage:
    uv run python -m scripts.check_api [--browser]

--browser resolves candidates as a browser-side caller would (public URL only).
Exit status is 0 when /health answered with 2xx, 1 otherwise.
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv

from app.core.config import get_settings
from app.core.constants import HEALTH_PATH
from app.infrastructure.external.admin_api import AdminApiError, build_admin_api_client


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees the API_* variables."""
    load_dotenv(_project_root() / ".env", override=True)


async def run(server_side: bool) -> int:
    settings = get_settings()
    print(f"Environment: {settings.environment}")
    print(f"  API_URL: {settings.api_url or 'not set'}")
    print(f"  INTERNAL_API_URL: {settings.internal_api_url or 'not set'}")
    print(f"  PUBLIC_API_URL: {settings.public_api_url or 'not set'}")
    print(f"  Server side: {server_side}")

    async with build_admin_api_client(server_side=server_side) as client:
        print("Candidate base URLs:")
        for url in client.candidate_urls:
            print(f"  {url}")
        try:
            body = await client.get(HEALTH_PATH)
        except AdminApiError as e:
            print(f"Health check failed (status {e.status}): {e.message}", file=sys.stderr)
            return 1
        print(f"Working base URL: {client.working_base_url}")
        print(f"Response: {body}")
    return 0


def main() -> None:
    _load_env()
    get_settings.cache_clear()
    server_side = "--browser" not in sys.argv[1:]
    sys.exit(asyncio.run(run(server_side)))


if __name__ == "__main__":
    main()
