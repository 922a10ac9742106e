"""Access gate: decides whether an authenticated email may administer the tables."""

from __future__ import annotations

from collections.abc import Iterable

from app.domain.exceptions import AuthorizationException


class AccessGate:
    """Case-insensitive email allow-list."""

    def __init__(self, admin_emails: Iterable[str]) -> None:
        self._allowed = frozenset(
            email.strip().lower() for email in admin_emails if email and email.strip()
        )

    def is_admin(self, email: str | None) -> bool:
        """Return True if email is on the allow-list (surrounding whitespace ignored)."""
        if not email:
            return False
        return email.strip().lower() in self._allowed

    def require_admin(self, email: str | None) -> str:
        """Return the normalized email, or raise AuthorizationException."""
        if not self.is_admin(email):
            raise AuthorizationException(email)
        return email.strip().lower()
