"""HTTP API request/response models.

Each operation has an explicit request model listing its required path
fields and its optional body fields. All fields are declared optional so that
a missing or null required field is reported by the client as an
``ArgumentError`` instead of a pydantic validation failure. Body fields are
typed ``Any`` and reach the wire as given. Unknown fields are ignored, which
keeps the outgoing body restricted to the whitelisted fields.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from gs2_realtime.models.entities import Gathering, GatheringPool


class RealtimeRequest(BaseModel):
    """Base class for request models.

    Subclasses declare ``required_fields`` (path identifiers, checked in
    order) and ``body_fields`` (copied to the request body in order, only
    when the caller set them).
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    required_fields: ClassVar[tuple[str, ...]] = ()
    body_fields: ClassVar[tuple[str, ...]] = ()

    def missing_fields(self) -> list[str]:
        """Return required fields that are absent or null, in declared order."""
        return [
            name
            for name in self.required_fields
            if name not in self.model_fields_set or getattr(self, name) is None
        ]

    def to_body(self) -> dict[str, Any]:
        """Serialize the whitelisted body fields the caller provided.

        A field set explicitly to None is sent as JSON null; a field that was
        never set is left out.
        """
        # body_fields follow field declaration order, which model_dump keeps
        included = {name for name in self.body_fields if name in self.model_fields_set}
        return self.model_dump(by_alias=True, include=included)


# =============================================================================
# Gathering Pool API
# =============================================================================


class CreateGatheringPoolRequest(RealtimeRequest):
    """Request body for POST /gatheringPool."""

    body_fields: ClassVar[tuple[str, ...]] = ("name", "description")

    name: Any = None
    description: Any = None


class GetGatheringPoolRequest(RealtimeRequest):
    """Request for GET /gatheringPool/{gatheringPoolName}."""

    required_fields: ClassVar[tuple[str, ...]] = ("gathering_pool_name",)

    gathering_pool_name: str | None = Field(default=None, alias="gatheringPoolName")


class UpdateGatheringPoolRequest(RealtimeRequest):
    """Request for PUT /gatheringPool/{gatheringPoolName}."""

    required_fields: ClassVar[tuple[str, ...]] = ("gathering_pool_name",)
    body_fields: ClassVar[tuple[str, ...]] = ("description",)

    gathering_pool_name: str | None = Field(default=None, alias="gatheringPoolName")
    description: Any = None


class DeleteGatheringPoolRequest(RealtimeRequest):
    """Request for DELETE /gatheringPool/{gatheringPoolName}."""

    required_fields: ClassVar[tuple[str, ...]] = ("gathering_pool_name",)

    gathering_pool_name: str | None = Field(default=None, alias="gatheringPoolName")


class DescribeGatheringPoolResult(BaseModel):
    """Response from GET /gatheringPool."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    items: list[GatheringPool] = Field(default_factory=list)
    next_page_token: str | None = Field(default=None, alias="nextPageToken")


class GatheringPoolResult(BaseModel):
    """Response carrying a single gathering pool."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    item: GatheringPool


# =============================================================================
# Gathering API
# =============================================================================


class DescribeGatheringRequest(RealtimeRequest):
    """Request for GET /gatheringPool/{gatheringPoolName}/gathering."""

    required_fields: ClassVar[tuple[str, ...]] = ("gathering_pool_name",)

    gathering_pool_name: str | None = Field(default=None, alias="gatheringPoolName")


class CreateGatheringRequest(RealtimeRequest):
    """Request for POST /gatheringPool/{gatheringPoolName}/gathering.

    ``user_ids`` restricts who may join. A list or tuple is sent comma-joined;
    any other value is sent as given.
    """

    required_fields: ClassVar[tuple[str, ...]] = ("gathering_pool_name",)
    body_fields: ClassVar[tuple[str, ...]] = ("name", "user_ids")

    gathering_pool_name: str | None = Field(default=None, alias="gatheringPoolName")
    name: Any = None
    user_ids: Any = Field(default=None, alias="userIds")

    @field_serializer("user_ids")
    def join_user_ids(self, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return ",".join(map(str, value))
        return value


class GetGatheringRequest(RealtimeRequest):
    """Request for GET /gatheringPool/{gatheringPoolName}/gathering/{gatheringName}."""

    required_fields: ClassVar[tuple[str, ...]] = (
        "gathering_pool_name",
        "gathering_name",
    )

    gathering_pool_name: str | None = Field(default=None, alias="gatheringPoolName")
    gathering_name: str | None = Field(default=None, alias="gatheringName")


class DeleteGatheringRequest(RealtimeRequest):
    """Request for DELETE /gatheringPool/{gatheringPoolName}/gathering/{gatheringName}."""

    required_fields: ClassVar[tuple[str, ...]] = (
        "gathering_pool_name",
        "gathering_name",
    )

    gathering_pool_name: str | None = Field(default=None, alias="gatheringPoolName")
    gathering_name: str | None = Field(default=None, alias="gatheringName")


class DescribeGatheringResult(BaseModel):
    """Response from GET /gatheringPool/{gatheringPoolName}/gathering."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    items: list[Gathering] = Field(default_factory=list)
    next_page_token: str | None = Field(default=None, alias="nextPageToken")


class GatheringResult(BaseModel):
    """Response carrying a single gathering."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    item: Gathering
