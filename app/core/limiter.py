"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. create_app() toggles limiter.enabled from
settings.rate_limit_enabled.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.constants import WRITE_ENDPOINT_LIMIT

limiter = Limiter(key_func=get_remote_address)

limit_writes = limiter.limit(WRITE_ENDPOINT_LIMIT)
