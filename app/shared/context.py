"""Request context management using contextvars.

Holds request-scoped values (request id, acting admin email) so log records
and services can read them without threading the request object through.

Usage:
    set_request_id("abc123")
    set_current_admin("admin@example.com")
    get_current_admin()
"""

from contextvars import ContextVar, Token

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)
_current_admin: ContextVar[str | None] = ContextVar("current_admin", default=None)


def set_request_id(request_id: str | None) -> Token[str | None]:
    """Set the id of the request being handled; returns a token for reset_request_id."""
    return _request_id.set(request_id)


def reset_request_id(token: Token[str | None]) -> None:
    """Restore the request id that was current before set_request_id."""
    _request_id.reset(token)


def get_request_id() -> str | None:
    """Return the current request id, or None outside a request."""
    return _request_id.get()


def set_current_admin(email: str | None) -> None:
    """Set the email of the admin that passed the access gate for this request."""
    _current_admin.set(email)


def get_current_admin() -> str | None:
    """Return the current admin email, or None if not authenticated."""
    return _current_admin.get()
