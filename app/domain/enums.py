"""Domain enumerations for the permit admin application."""

from enum import Enum


class RequiredFor(str, Enum):
    """Party a required document applies to."""

    EMPLOYEE = "employee"
    EMPLOYER = "employer"
    BOTH = "both"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings (e.g. for the DB check constraint)."""
        return [party.value for party in cls]
