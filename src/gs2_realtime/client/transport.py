"""Signed HTTP transport for the realtime REST API.

This module performs the actual HTTP exchange: it signs each request with
the caller's credentials, sends it with httpx, decodes the JSON response and
turns non-2xx responses into ``ServiceError`` subclasses.
"""

from __future__ import annotations

import logging
from typing import Any

from httpx import Client, HTTPError, HTTPTransport, Response, TimeoutException

from gs2_realtime.client.credentials import Gs2Credentials
from gs2_realtime.config import DEFAULT_BASE_URL_TEMPLATE, RealtimeClientConfig
from gs2_realtime.errors import (
    RequestTimeoutError,
    ServiceConnectionError,
    ServiceError,
    error_for_status,
)

logger = logging.getLogger(__name__)


class Gs2Transport:
    """Synchronous HTTP transport shared by service clients.

    Example:
        credentials = Gs2Credentials("client-id", "c2VjcmV0")
        with Gs2Transport("ap-northeast-1", credentials) as transport:
            transport.get("Gs2Realtime", "DescribeGatheringPool",
                          "realtime", "/gatheringPool")
    """

    def __init__(
        self,
        region: str,
        credentials: Gs2Credentials,
        *,
        timeout: float = 30.0,
        max_retries: int = 0,
        base_url_template: str = DEFAULT_BASE_URL_TEMPLATE,
    ):
        """Initialize the transport.

        Args:
            region: Region the service is deployed in.
            credentials: Signer used for every request.
            timeout: Request timeout in seconds (default: 30.0)
            max_retries: Connection retries done by httpx itself (default: 0)
            base_url_template: Base URL with {endpoint} and {region} placeholders.
        """
        self.region = region
        self.credentials = credentials
        self.timeout = timeout
        self.max_retries = max_retries
        self.base_url_template = base_url_template
        self._client: Client | None = None

    @classmethod
    def from_config(
        cls, config: RealtimeClientConfig, credentials: Gs2Credentials
    ) -> Gs2Transport:
        """Build a transport from a RealtimeClientConfig."""
        return cls(
            config.region,
            credentials,
            timeout=config.timeout,
            max_retries=config.max_retries,
            base_url_template=config.base_url_template,
        )

    def __enter__(self) -> Gs2Transport:
        self.connect()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.close()

    def connect(self) -> None:
        """Create the pooled httpx client. Safe to call more than once."""
        if self._client is None:
            self._client = Client(
                timeout=self.timeout,
                transport=HTTPTransport(retries=self.max_retries),
            )
            logger.debug("HTTP transport opened for region %s", self.region)

    def close(self) -> None:
        """Close the httpx client and release connections."""
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.debug("HTTP transport closed")

    def base_url(self, endpoint_key: str) -> str:
        """Return the service base URL for an endpoint key."""
        return self.base_url_template.format(
            endpoint=endpoint_key, region=self.region
        ).rstrip("/")

    # =========================================================================
    # Verbs
    # =========================================================================

    def get(
        self,
        service: str,
        operation: str,
        endpoint_key: str,
        path: str,
        query: dict[str, Any] | None = None,
    ) -> Any:
        return self._request("GET", service, operation, endpoint_key, path, query)

    def post(
        self,
        service: str,
        operation: str,
        endpoint_key: str,
        path: str,
        query: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        return self._request(
            "POST", service, operation, endpoint_key, path, query, body or {}
        )

    def put(
        self,
        service: str,
        operation: str,
        endpoint_key: str,
        path: str,
        query: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        return self._request(
            "PUT", service, operation, endpoint_key, path, query, body or {}
        )

    def delete(
        self,
        service: str,
        operation: str,
        endpoint_key: str,
        path: str,
        query: dict[str, Any] | None = None,
    ) -> Any:
        return self._request("DELETE", service, operation, endpoint_key, path, query)

    # =========================================================================
    # Internal
    # =========================================================================

    def _request(
        self,
        method: str,
        service: str,
        operation: str,
        endpoint_key: str,
        path: str,
        query: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        """Send one signed request and decode the response.

        Returns:
            The decoded JSON document, or None for an empty 2xx body.

        Raises:
            ServiceError: Subclass chosen by HTTP status for non-2xx responses.
            RequestTimeoutError: If the request timed out.
            ServiceConnectionError: If the transport failed or is not connected.
        """
        if self._client is None:
            raise ServiceConnectionError(
                "Transport not connected. Call connect() first."
            )

        headers = {
            "Content-Type": "application/json",
            "X-GS2-TARGET": f"{service}.{operation}",
        }
        headers.update(self.credentials.sign(service, operation))

        kwargs: dict[str, Any] = {"headers": headers}
        if query:
            kwargs["params"] = query
        if body is not None:
            kwargs["json"] = body

        url = self.base_url(endpoint_key) + path
        logger.debug("Request %s %s (%s.%s)", method, path, service, operation)

        try:
            response = self._client.request(method, url, **kwargs)
        except TimeoutException as e:
            logger.warning("Request timeout for %s %s: %s", method, path, e)
            raise RequestTimeoutError(f"Request timeout: {e}") from e
        except HTTPError as e:
            logger.warning("HTTP error for %s %s: %s", method, path, e)
            raise ServiceConnectionError(f"HTTP error: {e}") from e

        return self._decode(response)

    def _decode(self, response: Response) -> Any:
        if not 200 <= response.status_code < 300:
            error_body = self._error_body(response)
            message = error_body
            if isinstance(error_body, dict) and "message" in error_body:
                message = error_body["message"]
            logger.warning("API error %d: %s", response.status_code, message)
            raise error_for_status(
                response.status_code,
                f"API error: {message}",
                body=error_body,
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ServiceError(
                f"Malformed JSON response: {e}",
                status_code=response.status_code,
            ) from e

    @staticmethod
    def _error_body(response: Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text
