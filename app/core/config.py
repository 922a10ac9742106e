"""Application configuration (settings and environment).

Single source of truth for server and client configuration. Uses
pydantic-settings with .env support. The admin API endpoint fields feed the
candidate URL list of the admin API client (see
app.infrastructure.external.admin_api.endpoints).
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PUBLIC_API_URL = "https://admin-api.thecodejesters.xyz"


def _split_csv(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Everything has a default so the client half can be used without any
    server configuration. validate_environment only rejects combinations
    that are unsafe (dev auth bypass in production).
    """

    # App
    app_name: str = "permit-admin"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"

    # Entity store (any SQLAlchemy async URL; postgresql+asyncpg in production)
    database_url: str = ""
    database_echo: bool = False
    db_pool_size: int | None = None
    db_max_overflow: int | None = None

    # Access gate
    jwt_secret: SecretStr = SecretStr("")
    jwt_algorithm: str = "HS256"
    jwt_audience: str | None = "authenticated"
    access_token_expire_minutes: int = 60
    admin_emails: str = ""
    dev_bypass_auth: bool = False
    dev_user_email: str = "dev@localhost.com"

    # Admin API client: candidate base URLs, highest priority first.
    api_url: str | None = None
    internal_api_url: str | None = None
    public_api_url: str | None = None
    local_api_urls: str = "http://localhost:3001,http://127.0.0.1:3001"
    default_api_url: str = DEFAULT_PUBLIC_API_URL
    admin_api_token: SecretStr | None = None
    admin_api_timeout_seconds: float = 10.0

    # HTTP
    allowed_origins: str = "http://localhost:3000"
    request_id_header: str = "X-Request-ID"
    rate_limit_enabled: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_environment(self) -> "Settings":
        """Refuse the development auth bypass outside development."""
        if self.dev_bypass_auth and self.environment == "production":
            raise ValueError(
                "DEV_BYPASS_AUTH must not be enabled when ENVIRONMENT is 'production'."
            )
        return self

    @property
    def admin_email_list(self) -> list[str]:
        """Allow-listed admin emails from the comma-separated ADMIN_EMAILS."""
        return _split_csv(self.admin_emails)

    @property
    def local_api_url_list(self) -> list[str]:
        """Local fallback base URLs from the comma-separated LOCAL_API_URLS."""
        return _split_csv(self.local_api_urls)

    @property
    def allowed_origin_list(self) -> list[str]:
        return _split_csv(self.allowed_origins)


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.
    """
    return Settings()
