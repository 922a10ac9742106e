"""Tests for settings validation and admin token handling."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from app.core.config import Settings
from app.infrastructure.security.jwt import create_access_token, verify_token


def test_dev_bypass_refused_in_production() -> None:
    with pytest.raises(ValidationError, match="DEV_BYPASS_AUTH"):
        Settings(dev_bypass_auth=True, environment="production", _env_file=None)


def test_comma_separated_lists_are_trimmed() -> None:
    settings = Settings(
        admin_emails=" a@example.com,, b@example.com ",
        allowed_origins="http://a, http://b",
        _env_file=None,
    )
    assert settings.admin_email_list == ["a@example.com", "b@example.com"]
    assert settings.allowed_origin_list == ["http://a", "http://b"]


def test_token_round_trip_keeps_email() -> None:
    token = create_access_token({"sub": "u1", "email": "admin@example.com"})
    payload = verify_token(token)
    assert payload["email"] == "admin@example.com"
    assert payload["aud"] == "authenticated"


def test_expired_token_is_rejected() -> None:
    token = create_access_token(
        {"sub": "u1", "email": "admin@example.com"}, expires_delta=timedelta(seconds=-5)
    )
    with pytest.raises(ValueError, match="Invalid token"):
        verify_token(token)


def test_token_without_email_is_rejected() -> None:
    token = create_access_token({"sub": "u1"})
    with pytest.raises(ValueError, match="email"):
        verify_token(token)
