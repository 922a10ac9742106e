"""HTTP middleware: request ID propagation.

Applied in create_app(); the last middleware added is the outermost.
"""

from app.middleware.request_id import RequestIDMiddleware

__all__ = [
    "RequestIDMiddleware",
]
