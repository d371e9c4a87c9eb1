"""Python client for the realtime gathering-pool API."""

from gs2_realtime.client import Gs2Credentials, Gs2Transport, RealtimeClient
from gs2_realtime.config import RealtimeClientConfig
from gs2_realtime.errors import (
    ArgumentError,
    BadGatewayError,
    BadRequestError,
    ConflictError,
    Gs2RealtimeError,
    InternalServerError,
    NotFoundError,
    QuotaExceedError,
    RequestTimeoutError,
    ResponseValidationError,
    ServiceConnectionError,
    ServiceError,
    ServiceUnavailableError,
    UnauthorizedError,
)

__version__ = "0.1.0"

__all__ = [
    "RealtimeClient",
    "RealtimeClientConfig",
    "Gs2Transport",
    "Gs2Credentials",
    # Errors
    "Gs2RealtimeError",
    "ArgumentError",
    "ServiceError",
    "BadRequestError",
    "UnauthorizedError",
    "QuotaExceedError",
    "NotFoundError",
    "ConflictError",
    "InternalServerError",
    "BadGatewayError",
    "ServiceUnavailableError",
    "RequestTimeoutError",
    "ServiceConnectionError",
    "ResponseValidationError",
]
