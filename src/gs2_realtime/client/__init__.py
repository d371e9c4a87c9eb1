"""HTTP client module for the realtime API.

Usage:
    from gs2_realtime.client import Gs2Credentials, RealtimeClient

    credentials = Gs2Credentials("client-id", "c2VjcmV0")
    config = RealtimeClientConfig(region="ap-northeast-1")
    with RealtimeClient.from_config(config, credentials) as client:
        pools = client.describe_gathering_pool()
"""

from gs2_realtime.client.credentials import Gs2Credentials
from gs2_realtime.client.realtime_client import RealtimeClient, Transport
from gs2_realtime.client.transport import Gs2Transport

__all__ = [
    "RealtimeClient",
    "Transport",
    "Gs2Transport",
    "Gs2Credentials",
]
