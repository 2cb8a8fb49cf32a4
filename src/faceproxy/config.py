"""Environment-based configuration for FaceProxy."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from AZURE_FACE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="AZURE_FACE_",
        case_sensitive=False,
    )

    # Server
    host: str = "0.0.0.0"  # noqa: S104
    port: int = Field(default=8000, ge=1, le=65535)

    # Upstream (both required to serve detections; must include scheme)
    endpoint: str | None = None
    key: str | None = None

    # Attribute allow-list and model selection sent upstream
    detection_profile: Literal["recognition_04", "detection_03"] = "recognition_04"

    @property
    def configured(self) -> bool:
        """Whether both the upstream endpoint and key are set to non-empty values."""
        return bool(self.endpoint) and bool(self.key)


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()
