"""Failure results produced by the face proxy.

These are returned, not raised: every step of the proxy yields either its
value or one of these, and the route layer turns any of them into an
ErrorEnvelope response.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fastapi import status

MISSING_CREDENTIALS_MESSAGE = (
    "Missing Azure Face API credentials. Set AZURE_FACE_ENDPOINT and AZURE_FACE_KEY in your environment."
)
INVALID_JSON_MESSAGE = "Invalid JSON body"
MISSING_FIELD_MESSAGE = "Request must include an imageUrl field"
EMPTY_FIELD_MESSAGE = "imageUrl must be a non-empty string"
INVALID_TEXT_MESSAGE = "imageUrl must be valid Unicode text"
AUTH_REJECTED_MESSAGE = (
    "Azure rejected the request. Double-check that your Face API resource is approved for use "
    "and that the endpoint and key belong to the same resource."
)
UPSTREAM_FAILED_MESSAGE = "Azure Face API request failed"
UNEXPECTED_ERROR_MESSAGE = "Unexpected error calling Azure Face API"


@dataclass(frozen=True)
class ProxyError:
    """Base failure result: a message, the HTTP status to answer with, optional details."""

    message: str
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    details: Any = None


@dataclass(frozen=True)
class ConfigurationError(ProxyError):
    """Upstream endpoint or key is not configured."""

    message: str = MISSING_CREDENTIALS_MESSAGE


@dataclass(frozen=True)
class ClientInputError(ProxyError):
    """The inbound body is malformed or lacks a usable imageUrl."""

    status_code: int = status.HTTP_400_BAD_REQUEST


@dataclass(frozen=True)
class UpstreamRejection(ProxyError):
    """The provider answered with a non-success status."""

    @classmethod
    def from_status(cls, status_code: int, details: Any) -> UpstreamRejection:
        auth_failure = status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN)
        message = AUTH_REJECTED_MESSAGE if auth_failure else UPSTREAM_FAILED_MESSAGE
        return cls(message=message, status_code=status_code, details=details)


@dataclass(frozen=True)
class TransportFailure(ProxyError):
    """The outbound call could not complete."""

    message: str = UNEXPECTED_ERROR_MESSAGE
