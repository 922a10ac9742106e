"""JWT token creation and verification for admin identities.

Tokens are Supabase-style access tokens: HS256 signed with JWT_SECRET,
carrying ``sub``, ``email``, ``exp`` and (when JWT_AUDIENCE is set) ``aud``.
"""

from datetime import timedelta
from typing import Any, cast

from jose import JWTError, jwt

from app.core.config import get_settings
from app.shared.utils.datetime import utc_now


def _secret() -> str:
    secret = get_settings().jwt_secret.get_secret_value()
    if not secret:
        raise ValueError("JWT_SECRET is not configured")
    return secret


def create_access_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """Create a JWT access token with the given claims.

    Used by tooling and tests to mint admin tokens; production tokens come
    from the identity provider.

    Args:
        data: Claims to encode (sub, email).
        expires_delta: Optional TTL; else uses settings.access_token_expire_minutes.

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = utc_now() + expires_delta
    if settings.jwt_audience and "aud" not in to_encode:
        to_encode["aud"] = settings.jwt_audience
    encoded = jwt.encode(to_encode, _secret(), algorithm=settings.jwt_algorithm)
    return cast(str, encoded)


def verify_token(token: str) -> dict[str, Any]:
    """Verify and decode a JWT. Returns the payload.

    Enforces presence of exp, sub and email.

    Raises:
        ValueError: If the secret is missing, or the token is invalid,
            expired, or missing required claims.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            _secret(),
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    if not payload.get("email"):
        raise ValueError("Token missing required claim: email")
    return payload
