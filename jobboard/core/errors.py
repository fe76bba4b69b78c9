"""
core/errors.py
--------------
Error taxonomy shared by the access layer, services and routes.

Every class maps to one HTTP status and one client-facing message. The
message is deliberately generic: upstream/store errors and cross-tenant
denials must not reveal schema details or the existence of rows.
"""

from fastapi import status


class AccessError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal server error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class NotAuthenticatedError(AccessError):
    """No valid session. Bad, expired and missing tokens look the same."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Please sign in"


class ForbiddenError(AccessError):
    """Authenticated but the whole route is off-limits for this role."""

    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Forbidden"


class ResourceNotFoundError(AccessError):
    """Row is absent OR belongs to a tenant outside the caller's scope."""

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class InvalidInputError(AccessError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid input"


class UpstreamFailureError(AccessError):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = "Upstream service failure"
