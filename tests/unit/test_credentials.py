"""Unit tests for Gs2Credentials request signing."""

import base64
import hashlib
import hmac

import pytest

from gs2_realtime import ArgumentError, Gs2Credentials


class TestGs2CredentialsInit:
    """Tests for credential construction."""

    def test_client_id_is_exposed(self, credentials) -> None:
        """Test the client id is readable."""
        assert credentials.client_id == "test-client-id"

    def test_repr_hides_secret(self, credentials) -> None:
        """Test the secret never shows up in repr()."""
        assert "dGVzdC1zZWNyZXQ" not in repr(credentials)
        assert "test-client-id" in repr(credentials)

    @pytest.mark.parametrize(
        "client_id,client_secret",
        [("", "dGVzdC1zZWNyZXQ="), ("id", ""), ("id", "not base64!")],
    )
    def test_invalid_credentials_raise(self, client_id, client_secret) -> None:
        """Test empty ids and non-base64 secrets are rejected."""
        with pytest.raises(ArgumentError):
            Gs2Credentials(client_id, client_secret)


class TestSign:
    """Tests for sign()."""

    def test_sign_headers(self, credentials) -> None:
        """Test signing yields client id, timestamp and HMAC signature."""
        headers = credentials.sign(
            "Gs2Realtime", "CreateGathering", timestamp=1500000000
        )

        expected = base64.b64encode(
            hmac.new(
                b"test-secret",
                b"Gs2Realtime:CreateGathering:1500000000",
                hashlib.sha256,
            ).digest()
        ).decode()
        assert headers == {
            "X-GS2-CLIENT-ID": "test-client-id",
            "X-GS2-REQUEST-TIMESTAMP": "1500000000",
            "X-GS2-REQUEST-SIGNATURE": expected,
        }

    def test_signature_depends_on_operation(self, credentials) -> None:
        """Test different operations produce different signatures."""
        first = credentials.sign("Gs2Realtime", "GetGathering", timestamp=1)
        second = credentials.sign("Gs2Realtime", "DeleteGathering", timestamp=1)
        assert first["X-GS2-REQUEST-SIGNATURE"] != second["X-GS2-REQUEST-SIGNATURE"]

    def test_sign_defaults_to_current_time(self, credentials) -> None:
        """Test the timestamp defaults to the current unix time."""
        headers = credentials.sign("Gs2Realtime", "GetGathering")
        assert headers["X-GS2-REQUEST-TIMESTAMP"].isdigit()
        assert int(headers["X-GS2-REQUEST-TIMESTAMP"]) > 1500000000
