"""Pydantic models for the realtime API client.

Usage:
    from gs2_realtime.models import Gathering, GatheringPool
    from gs2_realtime.models import CreateGatheringRequest, GatheringResult
"""

from gs2_realtime.models.api import (
    CreateGatheringPoolRequest,
    CreateGatheringRequest,
    DeleteGatheringPoolRequest,
    DeleteGatheringRequest,
    DescribeGatheringPoolResult,
    DescribeGatheringRequest,
    DescribeGatheringResult,
    GatheringPoolResult,
    GatheringResult,
    GetGatheringPoolRequest,
    GetGatheringRequest,
    RealtimeRequest,
    UpdateGatheringPoolRequest,
)
from gs2_realtime.models.entities import Gathering, GatheringPool

__all__ = [
    # Entities
    "GatheringPool",
    "Gathering",
    # Requests
    "RealtimeRequest",
    "CreateGatheringPoolRequest",
    "GetGatheringPoolRequest",
    "UpdateGatheringPoolRequest",
    "DeleteGatheringPoolRequest",
    "DescribeGatheringRequest",
    "CreateGatheringRequest",
    "GetGatheringRequest",
    "DeleteGatheringRequest",
    # Responses
    "DescribeGatheringPoolResult",
    "GatheringPoolResult",
    "DescribeGatheringResult",
    "GatheringResult",
]
