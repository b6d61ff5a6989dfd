"""Defines the wire models returned by the prof service."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Profile(BaseModel):
    """A profile record as stored by the service.

    Fields the service adds beyond the known ones are kept as-is and
    re-emitted by `to_wire`.
    """

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    uuid: str
    name: str
    email: str
    image_filename: str | None = Field(default=None, alias="imageFilename")
    created_at: str = Field(alias="createdAt")
    updated_at: str = Field(alias="updatedAt")

    @property
    def additional_fields(self) -> dict[str, Any]:
        return dict(self.model_extra or {})

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class ProfileResponse(BaseModel):
    success: bool
    profile: Profile | None = None
    error: str | None = None
    details: list[str] | None = None


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    timestamp: str


class MagicResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    success: bool
    error: str | None = None

    @property
    def data(self) -> dict[str, Any]:
        return dict(self.model_extra or {})
