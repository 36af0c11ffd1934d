"""HTTP middleware: request ID.

Applied in main app; order matters (last added = outermost).
"""

from portal.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
