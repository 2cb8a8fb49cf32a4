"""Pydantic request/response schemas for the FaceProxy API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DetectionRequest(BaseModel):
    """Inbound detection call: the image to analyze."""

    model_config = ConfigDict(strict=True, str_strip_whitespace=True, populate_by_name=True)

    image_url: str = Field(alias="imageUrl", min_length=1)


class FaceRectangle(BaseModel):
    """Axis-aligned bounding box in source-image pixels."""

    top: int = Field(ge=0)
    left: int = Field(ge=0)
    width: int = Field(ge=0)
    height: int = Field(ge=0)


class Face(BaseModel):
    """A detected face as returned by the provider.

    Documents the passthrough shape; attributes are an open map whose keys
    depend on the active detection profile.
    """

    model_config = ConfigDict(extra="allow")

    face_id: str | None = Field(default=None, alias="faceId")
    face_rectangle: FaceRectangle = Field(alias="faceRectangle")
    face_attributes: dict[str, Any] | None = Field(default=None, alias="faceAttributes")


class FaceSummary(BaseModel):
    """Human-readable digest of a single detected face."""

    id: str | None
    rectangle: dict[str, Any] | None
    summary: list[str]


class ErrorEnvelope(BaseModel):
    """Uniform error body for every failed call."""

    error: str
    details: Any = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    configured: bool
    detection_profile: str


class ProfileInfo(BaseModel):
    """Information about a registered detection profile."""

    name: str
    detection_model: str | None
    recognition_model: str | None
    attributes: list[str]
    status: str = Field(description="Profile status: 'active' or 'available'")


class ProfilesResponse(BaseModel):
    """Response for the profiles listing endpoint."""

    profiles: list[ProfileInfo]
