"""Client for the realtime gathering-pool REST API.

This module maps one method onto each REST endpoint of the realtime
service. It validates requests locally, assembles path, query and body, and
delegates the exchange to a transport. Errors raised by the transport are
never caught here.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any, Protocol, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from gs2_realtime.client.credentials import Gs2Credentials
from gs2_realtime.client.transport import Gs2Transport
from gs2_realtime.config import DEFAULT_ENDPOINT, RealtimeClientConfig
from gs2_realtime.errors import ArgumentError, ResponseValidationError
from gs2_realtime.models import (
    CreateGatheringPoolRequest,
    CreateGatheringRequest,
    DeleteGatheringPoolRequest,
    DeleteGatheringRequest,
    DescribeGatheringPoolResult,
    DescribeGatheringRequest,
    DescribeGatheringResult,
    Gathering,
    GatheringPool,
    GatheringPoolResult,
    GatheringResult,
    GetGatheringPoolRequest,
    GetGatheringRequest,
    RealtimeRequest,
    UpdateGatheringPoolRequest,
)

logger = logging.getLogger(__name__)

SERVICE_NAME = "Gs2Realtime"

R = TypeVar("R", bound=RealtimeRequest)
T = TypeVar("T", bound=BaseModel)

RequestLike = RealtimeRequest | Mapping[str, Any] | None


class Transport(Protocol):
    """Signed HTTP verbs the client depends on."""

    def get(
        self,
        service: str,
        operation: str,
        endpoint_key: str,
        path: str,
        query: dict[str, Any] | None = None,
    ) -> Any: ...

    def post(
        self,
        service: str,
        operation: str,
        endpoint_key: str,
        path: str,
        query: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any: ...

    def put(
        self,
        service: str,
        operation: str,
        endpoint_key: str,
        path: str,
        query: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any: ...

    def delete(
        self,
        service: str,
        operation: str,
        endpoint_key: str,
        path: str,
        query: dict[str, Any] | None = None,
    ) -> Any: ...


class RealtimeClient:
    """Client for gathering pools and gatherings.

    Request arguments accept either the matching request model or a plain
    mapping with the API's camelCase keys. Unknown keys are discarded.

    Example:
        config = RealtimeClientConfig(region="ap-northeast-1")
        credentials = Gs2Credentials("client-id", "c2VjcmV0")
        with RealtimeClient.from_config(config, credentials) as client:
            client.create_gathering_pool({"name": "pool1"})
            result = client.create_gathering(
                {"gatheringPoolName": "pool1", "userIds": ["u1", "u2"]}
            )
            print(result.item.ip_address, result.item.port)
    """

    def __init__(self, transport: Transport, endpoint: str = DEFAULT_ENDPOINT):
        """Initialize the client.

        Args:
            transport: Transport performing the signed HTTP exchange.
            endpoint: Endpoint key of the realtime service (default: "realtime")
        """
        self.transport = transport
        self.endpoint = endpoint

    @classmethod
    def from_config(
        cls, config: RealtimeClientConfig, credentials: Gs2Credentials
    ) -> RealtimeClient:
        """Build a client and its Gs2Transport from configuration."""
        return cls(Gs2Transport.from_config(config, credentials), config.endpoint)

    def __enter__(self) -> RealtimeClient:
        connect = getattr(self.transport, "connect", None)
        if connect is not None:
            connect()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying transport, if it supports closing."""
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()

    # =========================================================================
    # Gathering Pool
    # =========================================================================

    def describe_gathering_pool(
        self,
        page_token: str | None = None,
        limit: int | None = None,
    ) -> DescribeGatheringPoolResult:
        """List gathering pools.

        Args:
            page_token: Cursor returned as ``next_page_token`` by a previous call.
            limit: Maximum number of items to return.

        Returns:
            A page of GatheringPool records.
        """
        data = self.transport.get(
            SERVICE_NAME,
            "DescribeGatheringPool",
            self.endpoint,
            "/gatheringPool",
            _page_query(page_token, limit),
        )
        return _parse(data, DescribeGatheringPoolResult)

    def create_gathering_pool(self, request: RequestLike) -> GatheringPoolResult:
        """Create a gathering pool.

        A gathering pool must exist before any gathering can be created in it.

        Args:
            request: CreateGatheringPoolRequest or mapping with optional
                ``name`` and ``description``.

        Raises:
            ArgumentError: If ``request`` is None.
        """
        parsed = _coerce(request, CreateGatheringPoolRequest)
        data = self.transport.post(
            SERVICE_NAME,
            "CreateGatheringPool",
            self.endpoint,
            "/gatheringPool",
            {},
            parsed.to_body(),
        )
        return _parse(data, GatheringPoolResult)

    def get_gathering_pool(self, request: RequestLike) -> GatheringPoolResult:
        """Get a gathering pool by name.

        Raises:
            ArgumentError: If ``gatheringPoolName`` is missing.
        """
        parsed = _coerce(request, GetGatheringPoolRequest)
        data = self.transport.get(
            SERVICE_NAME,
            "GetGatheringPool",
            self.endpoint,
            f"/gatheringPool/{_segment(parsed.gathering_pool_name)}",
            {},
        )
        return _parse(data, GatheringPoolResult)

    def update_gathering_pool(self, request: RequestLike) -> GatheringPoolResult:
        """Update the description of a gathering pool.

        Raises:
            ArgumentError: If ``gatheringPoolName`` is missing.
        """
        parsed = _coerce(request, UpdateGatheringPoolRequest)
        data = self.transport.put(
            SERVICE_NAME,
            "UpdateGatheringPool",
            self.endpoint,
            f"/gatheringPool/{_segment(parsed.gathering_pool_name)}",
            {},
            parsed.to_body(),
        )
        return _parse(data, GatheringPoolResult)

    def delete_gathering_pool(self, request: RequestLike) -> Any:
        """Delete a gathering pool.

        Returns:
            Whatever the transport returned, unchanged.

        Raises:
            ArgumentError: If ``gatheringPoolName`` is missing.
        """
        parsed = _coerce(request, DeleteGatheringPoolRequest)
        return self.transport.delete(
            SERVICE_NAME,
            "DeleteGatheringPool",
            self.endpoint,
            f"/gatheringPool/{_segment(parsed.gathering_pool_name)}",
            {},
        )

    def iter_gathering_pools(self, limit: int | None = None) -> Iterator[GatheringPool]:
        """Yield every gathering pool, following page tokens."""
        page_token: str | None = None
        while True:
            page = self.describe_gathering_pool(page_token, limit)
            yield from page.items
            if not page.next_page_token:
                return
            page_token = page.next_page_token

    # =========================================================================
    # Gathering
    # =========================================================================

    def describe_gathering(
        self,
        request: RequestLike,
        page_token: str | None = None,
        limit: int | None = None,
    ) -> DescribeGatheringResult:
        """List the gatherings of a gathering pool.

        Args:
            request: Request carrying ``gatheringPoolName``.
            page_token: Cursor returned as ``next_page_token`` by a previous call.
            limit: Maximum number of items to return.

        Raises:
            ArgumentError: If ``gatheringPoolName`` is missing.
        """
        parsed = _coerce(request, DescribeGatheringRequest)
        data = self.transport.get(
            SERVICE_NAME,
            "DescribeGathering",
            self.endpoint,
            f"/gatheringPool/{_segment(parsed.gathering_pool_name)}/gathering",
            _page_query(page_token, limit),
        )
        return _parse(data, DescribeGatheringResult)

    def create_gathering(self, request: RequestLike) -> GatheringResult:
        """Create a gathering, which starts a game server.

        Players connect to the returned host over WebSocket and exchange
        messages with everyone connected to the same gathering. When
        ``userIds`` is given only those users may join; otherwise anyone
        holding the returned secret can.

        Args:
            request: CreateGatheringRequest or mapping with
                ``gatheringPoolName`` and optional ``name`` and ``userIds``.

        Raises:
            ArgumentError: If ``gatheringPoolName`` is missing.
        """
        parsed = _coerce(request, CreateGatheringRequest)
        data = self.transport.post(
            SERVICE_NAME,
            "CreateGathering",
            self.endpoint,
            f"/gatheringPool/{_segment(parsed.gathering_pool_name)}/gathering",
            {},
            parsed.to_body(),
        )
        return _parse(data, GatheringResult)

    def get_gathering(self, request: RequestLike) -> GatheringResult:
        """Get a gathering by pool and gathering name.

        Raises:
            ArgumentError: If ``gatheringPoolName`` or ``gatheringName`` is missing.
        """
        parsed = _coerce(request, GetGatheringRequest)
        data = self.transport.get(
            SERVICE_NAME,
            "GetGathering",
            self.endpoint,
            f"/gatheringPool/{_segment(parsed.gathering_pool_name)}"
            f"/gathering/{_segment(parsed.gathering_name)}",
            {},
        )
        return _parse(data, GatheringResult)

    def delete_gathering(self, request: RequestLike) -> Any:
        """Delete a gathering.

        Returns:
            Whatever the transport returned, unchanged.

        Raises:
            ArgumentError: If ``gatheringPoolName`` or ``gatheringName`` is missing.
        """
        parsed = _coerce(request, DeleteGatheringRequest)
        return self.transport.delete(
            SERVICE_NAME,
            "DeleteGathering",
            self.endpoint,
            f"/gatheringPool/{_segment(parsed.gathering_pool_name)}"
            f"/gathering/{_segment(parsed.gathering_name)}",
            {},
        )

    def iter_gatherings(
        self, request: RequestLike, limit: int | None = None
    ) -> Iterator[Gathering]:
        """Yield every gathering of a pool, following page tokens.

        The request is validated when iteration starts.
        """
        page_token: str | None = None
        while True:
            page = self.describe_gathering(request, page_token, limit)
            yield from page.items
            if not page.next_page_token:
                return
            page_token = page.next_page_token


# =============================================================================
# Helpers
# =============================================================================


def _coerce(request: RequestLike, model: type[R]) -> R:
    """Turn a request argument into ``model`` and check its required fields."""
    if request is None:
        raise ArgumentError(f"{model.__name__} must not be None")

    if isinstance(request, model):
        parsed = request
    else:
        if isinstance(request, BaseModel):
            request = request.model_dump(exclude_unset=True)
        if not isinstance(request, Mapping):
            raise ArgumentError(
                f"{model.__name__} must be a mapping or request model, "
                f"got {type(request).__name__}"
            )
        try:
            parsed = model.model_validate(dict(request))
        except ValidationError as e:
            raise ArgumentError(f"Invalid {model.__name__}: {e}") from e

    if parsed.missing_fields():
        raise ArgumentError(f"{model.__name__} is missing a required argument")
    return parsed


def _segment(name: str) -> str:
    # A name is exactly one path segment, including any "/", "?" or "#" in it
    return quote(name, safe="")


def _page_query(page_token: str | None, limit: int | None) -> dict[str, Any]:
    # Falsy values (None, "", 0) are treated as not provided
    query: dict[str, Any] = {}
    if page_token:
        query["pageToken"] = page_token
    if limit:
        query["limit"] = limit
    return query


def _parse(data: Any, model: type[T]) -> T:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.warning("Unexpected %s response: %s", model.__name__, e)
        raise ResponseValidationError(f"Response validation error: {e}") from e
