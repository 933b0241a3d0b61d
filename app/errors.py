"""
API error taxonomy
Each error carries a caller-facing message; the underlying cause is for the
server log only.
"""
from typing import Optional


class ApiError(Exception):
    """Base class for errors rendered as ErrorResponse"""

    status_code = 500
    code = "INTERNAL"

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class InvalidArgumentError(ApiError):
    status_code = 400
    code = "INVALID_ARGUMENT"


class UnauthenticatedError(ApiError):
    status_code = 401
    code = "UNAUTHENTICATED"


class UnauthorizedError(ApiError):
    # Same status as authentication failures, not 403
    status_code = 401
    code = "UNAUTHORIZED"


class NotFoundError(ApiError):
    status_code = 404
    code = "NOT_FOUND"


class InternalError(ApiError):
    status_code = 500
    code = "INTERNAL"
