"""Exception hierarchy for the realtime API client.

Two families of errors are raised:

- ``ArgumentError``: the request was malformed and was rejected locally,
  before any network access.
- ``ServiceError``: the request left the process and failed, either in the
  transport or with a non-2xx response from the backend.
"""

from __future__ import annotations

from typing import Any


class Gs2RealtimeError(Exception):
    """Base exception for all realtime client errors."""

    pass


class ArgumentError(Gs2RealtimeError, ValueError):
    """Raised when a request object or one of its required fields is missing."""

    pass


class ServiceError(Gs2RealtimeError):
    """Raised when the backend or the HTTP transport fails."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class BadRequestError(ServiceError):
    """HTTP 400."""

    pass


class UnauthorizedError(ServiceError):
    """HTTP 401."""

    pass


class QuotaExceedError(ServiceError):
    """HTTP 402, the account quota is exhausted."""

    pass


class NotFoundError(ServiceError):
    """HTTP 404."""

    pass


class ConflictError(ServiceError):
    """HTTP 409."""

    pass


class InternalServerError(ServiceError):
    """HTTP 500."""

    pass


class BadGatewayError(ServiceError):
    """HTTP 502."""

    pass


class ServiceUnavailableError(ServiceError):
    """HTTP 503."""

    pass


class RequestTimeoutError(ServiceError):
    """HTTP 504, or a client-side timeout."""

    pass


class ServiceConnectionError(ServiceError):
    """Raised when the backend cannot be reached."""

    pass


class ResponseValidationError(ServiceError):
    """Raised when a 2xx response does not have the expected envelope."""

    pass


STATUS_ERRORS: dict[int, type[ServiceError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    402: QuotaExceedError,
    404: NotFoundError,
    409: ConflictError,
    500: InternalServerError,
    502: BadGatewayError,
    503: ServiceUnavailableError,
    504: RequestTimeoutError,
}


def error_for_status(
    status_code: int, message: str, body: Any = None
) -> ServiceError:
    """Build the ServiceError subclass matching an HTTP status code."""
    error_cls = STATUS_ERRORS.get(status_code, ServiceError)
    return error_cls(message, status_code=status_code, body=body)
