"""Request proxy for the Azure Face detect API.

Flow:
    inbound body -> configuration check -> request validation
    -> POST <endpoint>/face/v1.0/detect -> relay payload or failure

Every step returns either its value or a ProxyError. Nothing is retried and
no timeout beyond the HTTP client's own default is applied.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import ValidationError

from faceproxy.api.schemas import DetectionRequest
from faceproxy.face.errors import (
    EMPTY_FIELD_MESSAGE,
    INVALID_JSON_MESSAGE,
    INVALID_TEXT_MESSAGE,
    MISSING_FIELD_MESSAGE,
    ClientInputError,
    ConfigurationError,
    ProxyError,
    TransportFailure,
    UpstreamRejection,
)
from faceproxy.face.profiles import build_detect_url, get_profile

if TYPE_CHECKING:
    from faceproxy.config import Settings
    from faceproxy.face.profiles import DetectionProfile

logger = logging.getLogger(__name__)

SUBSCRIPTION_KEY_HEADER = "Ocp-Apim-Subscription-Key"


@dataclass(frozen=True)
class UpstreamConfig:
    """Validated upstream coordinates for a single call."""

    endpoint: str
    key: str
    profile: DetectionProfile


@dataclass(frozen=True)
class Detected:
    """Successful detection: the provider's payload, untouched."""

    payload: Any


DetectionOutcome = Detected | ProxyError


def check_configuration(settings: Settings) -> UpstreamConfig | ConfigurationError:
    """Resolve endpoint, key and profile, or report what is missing."""
    if not settings.endpoint or not settings.key:
        return ConfigurationError()
    return UpstreamConfig(
        endpoint=settings.endpoint,
        key=settings.key,
        profile=get_profile(settings.detection_profile),
    )


def parse_detection_request(body: bytes | str) -> DetectionRequest | ClientInputError:
    """Validate an inbound body into a DetectionRequest.

    Checks run in order and stop at the first failure: JSON syntax, presence
    of ``imageUrl`` on an object, then a non-blank, encodable string value.
    """
    try:
        data = load_json(body)
    except (ValueError, RecursionError):
        return ClientInputError(INVALID_JSON_MESSAGE)

    if not isinstance(data, dict) or "imageUrl" not in data:
        return ClientInputError(MISSING_FIELD_MESSAGE)

    image_url = data["imageUrl"]
    if isinstance(image_url, str) and not _is_encodable(image_url):
        return ClientInputError(INVALID_TEXT_MESSAGE)

    try:
        return DetectionRequest.model_validate({"imageUrl": image_url})
    except ValidationError:
        return ClientInputError(EMPTY_FIELD_MESSAGE)


def _reject_constant(name: str) -> Any:
    msg = f"{name} is not valid JSON"
    raise ValueError(msg)


def _is_encodable(text: str) -> bool:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def load_json(text: bytes | str) -> Any:
    """json.loads restricted to standard JSON: NaN and Infinity are rejected."""
    return json.loads(text, parse_constant=_reject_constant)


def decode_payload(text: str) -> Any:
    """Parse a response body as JSON, falling back to the raw text."""
    try:
        parsed = load_json(text)
    except (ValueError, RecursionError):
        return text
    return text if parsed is None else parsed


def interpret_response(response: httpx.Response) -> Detected | UpstreamRejection:
    """Map an upstream response onto a success payload or a rejection."""
    payload = decode_payload(response.text)
    if response.is_success:
        return Detected(payload)

    logger.error("Azure Face API error (status=%s, body=%r)", response.status_code, payload)
    return UpstreamRejection.from_status(response.status_code, payload)


class FaceProxy:
    """Forwards detection calls to the configured Azure Face resource."""

    def __init__(self, settings: Settings, client: httpx.AsyncClient) -> None:
        self._settings = settings
        self._client = client

    async def detect(self, body: bytes | str) -> DetectionOutcome:
        """Run one inbound body through validation and the upstream call."""
        config = check_configuration(self._settings)
        if isinstance(config, ConfigurationError):
            logger.warning("Rejecting detection call: upstream endpoint or key not configured")
            return config

        request = parse_detection_request(body)
        if isinstance(request, ClientInputError):
            return request

        response = await self._send(config, request)
        if isinstance(response, TransportFailure):
            return response
        return interpret_response(response)

    async def _send(self, config: UpstreamConfig, request: DetectionRequest) -> httpx.Response | TransportFailure:
        try:
            url = build_detect_url(config.endpoint, config.profile)
            return await self._client.post(
                url,
                json={"url": request.image_url},
                headers={
                    "Content-Type": "application/json",
                    SUBSCRIPTION_KEY_HEADER: config.key,
                },
            )
        except Exception as exc:
            # any failure before a response exists is a transport failure
            logger.exception("Unexpected error calling Azure Face API")
            return TransportFailure(details=str(exc) or type(exc).__name__)
