"""Shared fixtures for gs2_realtime tests.

This module provides:
- A recording stub transport standing in for Gs2Transport
- A client wired to that stub
- Sample gathering pool and gathering payloads
"""

from typing import Any

import pytest

from gs2_realtime import Gs2Credentials, RealtimeClient

# base64 of "test-secret"
TEST_CLIENT_SECRET = "dGVzdC1zZWNyZXQ="


class RecordingTransport:
    """Transport stub that records every call and replays queued responses.

    Each recorded call is a dict with the verb and every argument, so tests
    can assert on path, query and body without any HTTP involved.
    """

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.responses: list[Any] = []

    def queue(self, *responses: Any) -> None:
        self.responses.extend(responses)

    def _record(self, method: str, **kwargs: Any) -> Any:
        self.calls.append({"method": method, **kwargs})
        if self.responses:
            return self.responses.pop(0)
        return None

    def get(self, service, operation, endpoint_key, path, query=None):
        return self._record(
            "GET",
            service=service,
            operation=operation,
            endpoint_key=endpoint_key,
            path=path,
            query=query,
        )

    def post(self, service, operation, endpoint_key, path, query=None, body=None):
        return self._record(
            "POST",
            service=service,
            operation=operation,
            endpoint_key=endpoint_key,
            path=path,
            query=query,
            body=body,
        )

    def put(self, service, operation, endpoint_key, path, query=None, body=None):
        return self._record(
            "PUT",
            service=service,
            operation=operation,
            endpoint_key=endpoint_key,
            path=path,
            query=query,
            body=body,
        )

    def delete(self, service, operation, endpoint_key, path, query=None):
        return self._record(
            "DELETE",
            service=service,
            operation=operation,
            endpoint_key=endpoint_key,
            path=path,
            query=query,
        )


@pytest.fixture
def transport() -> RecordingTransport:
    """Provide a fresh recording transport."""
    return RecordingTransport()


@pytest.fixture
def client(transport: RecordingTransport) -> RealtimeClient:
    """Provide a RealtimeClient backed by the recording transport."""
    return RealtimeClient(transport)


@pytest.fixture
def credentials() -> Gs2Credentials:
    """Provide test credentials with a known secret."""
    return Gs2Credentials("test-client-id", TEST_CLIENT_SECRET)


@pytest.fixture
def pool_data() -> dict[str, Any]:
    """Sample gathering pool as returned by the backend."""
    return {
        "gatheringPoolId": "grn:realtime:pool-0001",
        "ownerId": "owner-1",
        "name": "pool1",
        "description": "ranked matches",
        "createAt": 1500000000000,
    }


@pytest.fixture
def gathering_data() -> dict[str, Any]:
    """Sample gathering as returned by the backend."""
    return {
        "gatheringId": "grn:realtime:gathering-0001",
        "ownerId": "owner-1",
        "name": "g1",
        "hostId": "host-1",
        "ipAddress": "203.0.113.10",
        "port": 8080,
        "secret": "c2hhcmVkLXNlY3JldA==",
        "userIds": ["u1", "u2", "u3"],
        "createAt": 1500000000000,
    }
