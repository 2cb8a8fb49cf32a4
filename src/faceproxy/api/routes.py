"""API route definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from faceproxy.api.schemas import (
    ErrorEnvelope,
    Face,
    FaceSummary,
    HealthResponse,
    ProfileInfo,
    ProfilesResponse,
)
from faceproxy.face.errors import ProxyError
from faceproxy.face.profiles import PROFILE_REGISTRY
from faceproxy.face.summary import summarize_faces

if TYPE_CHECKING:
    from faceproxy.config import Settings
    from faceproxy.face.proxy import FaceProxy

router = APIRouter(prefix="/api")

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorEnvelope},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorEnvelope},
}


def _get_settings(request: Request) -> Settings:
    settings: Settings = request.app.state.settings
    return settings


def _get_face_proxy(request: Request) -> FaceProxy:
    proxy: FaceProxy = request.app.state.face_proxy
    return proxy


def _error_response(error: ProxyError) -> JSONResponse:
    envelope = ErrorEnvelope(error=error.message, details=error.details)
    return JSONResponse(
        status_code=error.status_code,
        content=envelope.model_dump(exclude_none=True),
    )


@router.post(
    "/face",
    response_model=list[Face],
    responses=_ERROR_RESPONSES,
    summary="Detect faces in an image URL",
)
async def detect_faces(request: Request) -> JSONResponse:
    """Forward an image URL to Azure Face and relay the detected faces unmodified."""
    outcome = await _get_face_proxy(request).detect(await request.body())
    if isinstance(outcome, ProxyError):
        return _error_response(outcome)
    return JSONResponse(status_code=status.HTTP_200_OK, content=outcome.payload)


@router.post(
    "/face/summary",
    response_model=list[FaceSummary],
    responses=_ERROR_RESPONSES,
    summary="Detect faces and summarize their attributes",
)
async def summarize_detected_faces(request: Request) -> JSONResponse:
    """Run a detection and reduce each face to human-readable summary lines."""
    outcome = await _get_face_proxy(request).detect(await request.body())
    if isinstance(outcome, ProxyError):
        return _error_response(outcome)
    summaries = summarize_faces(outcome.payload)
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=[summary.model_dump() for summary in summaries],
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
)
async def health(request: Request) -> HealthResponse:
    """Return service health and whether the upstream is configured."""
    settings = _get_settings(request)
    return HealthResponse(
        status="ok",
        configured=settings.configured,
        detection_profile=settings.detection_profile,
    )


@router.get(
    "/profiles",
    response_model=ProfilesResponse,
    summary="List detection profiles",
)
async def list_profiles(request: Request) -> ProfilesResponse:
    """Return registered detection profiles, marking the configured one active."""
    settings = _get_settings(request)
    return ProfilesResponse(
        profiles=[
            ProfileInfo(
                name=profile.name,
                detection_model=profile.detection_model,
                recognition_model=profile.recognition_model,
                attributes=list(profile.attributes),
                status="active" if profile.name == settings.detection_profile else "available",
            )
            for profile in PROFILE_REGISTRY.values()
        ]
    )
