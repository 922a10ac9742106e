"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import RequiredFor
from app.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    PermitAdminException,
    ResourceNotFoundException,
    StoreUnavailableException,
    ValidationException,
)

__all__ = [
    "RequiredFor",
    "AuthenticationException",
    "AuthorizationException",
    "PermitAdminException",
    "ResourceNotFoundException",
    "StoreUnavailableException",
    "ValidationException",
]
