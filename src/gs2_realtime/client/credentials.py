"""Request signing for the realtime API."""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import time

from gs2_realtime.errors import ArgumentError


class Gs2Credentials:
    """Client id / secret pair used to sign every request.

    The signature is an HMAC-SHA256 over ``"{service}:{operation}:{timestamp}"``
    keyed with the base64-decoded client secret.
    """

    __slots__ = ("_client_id", "_secret_key")

    def __init__(self, client_id: str, client_secret: str):
        if not client_id:
            raise ArgumentError("client_id must not be empty")
        if not client_secret:
            raise ArgumentError("client_secret must not be empty")
        try:
            secret_key = base64.b64decode(client_secret, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ArgumentError("client_secret must be base64 encoded") from e
        self._client_id = client_id
        self._secret_key = secret_key

    @property
    def client_id(self) -> str:
        return self._client_id

    def sign(
        self,
        service: str,
        operation: str,
        timestamp: int | None = None,
    ) -> dict[str, str]:
        """Build the authentication headers for one request.

        Args:
            service: Service name (e.g. "Gs2Realtime").
            operation: Operation name (e.g. "CreateGathering").
            timestamp: Unix time in seconds; defaults to now.

        Returns:
            Headers to merge into the outgoing request.
        """
        if timestamp is None:
            timestamp = int(time.time())
        message = f"{service}:{operation}:{timestamp}".encode()
        digest = hmac.new(self._secret_key, message, hashlib.sha256).digest()
        return {
            "X-GS2-CLIENT-ID": self._client_id,
            "X-GS2-REQUEST-TIMESTAMP": str(timestamp),
            "X-GS2-REQUEST-SIGNATURE": base64.b64encode(digest).decode("ascii"),
        }

    def __repr__(self) -> str:
        return f"Gs2Credentials(client_id={self._client_id!r})"
