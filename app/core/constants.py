"""Core constants: API paths and shared literal values.

Single source of truth for the admin API route layout, used by both the
FastAPI routers and the admin API client operations.
"""

# Fields assigned by the entity store; never client-settable and dropped on clone.
STORE_ASSIGNED_FIELDS = frozenset({"id", "updated_at", "created_at"})

# Route prefixes
PERMIT_RULES_PATH = "/api/permit-rules"
REQUIRED_DOCUMENTS_PATH = "/api/required-documents"
HEALTH_PATH = "/health"

# Write rate limit for mutation routes (slowapi syntax)
WRITE_ENDPOINT_LIMIT = "120/minute"
