"""Service-level errors translated to HTTP responses by the application."""

from __future__ import annotations

from fastapi import status


class ServiceError(Exception):
    """Base class for errors that map onto an HTTP status and a user-facing message.

    ``details`` carries the underlying error text; it is only exposed to clients
    outside production.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str | None = None, *, details: str | None = None) -> None:
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class BadRequest(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class NotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class BadGateway(ServiceError):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "Upstream service error"


class GatewayTimeout(ServiceError):
    status_code = status.HTTP_504_GATEWAY_TIMEOUT
    default_message = "Upstream service timed out"


class InternalError(ServiceError):
    pass
