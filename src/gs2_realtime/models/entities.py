"""Entity records returned by the realtime API.

Entities are round-tripped as opaque JSON: every documented field is optional
and unknown fields returned by the backend are kept on the model.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GatheringPool(BaseModel):
    """A named namespace grouping related gatherings."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    gathering_pool_id: str | None = Field(default=None, alias="gatheringPoolId")
    owner_id: str | None = Field(default=None, alias="ownerId")
    name: str | None = None
    description: str | None = None
    create_at: int | None = Field(default=None, alias="createAt")


class Gathering(BaseModel):
    """A live multiplayer session.

    Players connect to ``ip_address``:``port`` and authenticate with
    ``secret``. When ``user_ids`` is empty anyone holding the secret may join.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    gathering_id: str | None = Field(default=None, alias="gatheringId")
    owner_id: str | None = Field(default=None, alias="ownerId")
    name: str | None = None
    host_id: str | None = Field(default=None, alias="hostId")
    ip_address: str | None = Field(default=None, alias="ipAddress")
    port: int | None = None
    secret: str | None = None
    user_ids: list[str] = Field(default_factory=list, alias="userIds")
    create_at: int | None = Field(default=None, alias="createAt")

    @field_validator("user_ids", mode="before")
    @classmethod
    def split_user_ids(cls, value: Any) -> Any:
        # The backend may echo the allow-list in its comma-joined wire form
        if value is None:
            return []
        if isinstance(value, str):
            return [user_id for user_id in value.split(",") if user_id]
        return value
