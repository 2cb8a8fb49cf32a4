"""Detection profiles: the model versions and attribute allow-list sent upstream.

The provider rejects unknown or unauthorized attribute combinations, so only
the vetted sets registered here are ever requested.
"""

from __future__ import annotations

from dataclasses import dataclass

DETECT_PATH = "/face/v1.0/detect"


@dataclass(frozen=True)
class DetectionProfile:
    """Static query configuration for one upstream detection variant."""

    name: str
    detection_model: str | None
    recognition_model: str | None
    return_face_id: bool
    attributes: tuple[str, ...]

    def query_params(self) -> list[tuple[str, str]]:
        """Return the ordered query parameters for a detect call."""
        params = [("returnFaceId", "true" if self.return_face_id else "false")]
        if self.detection_model is not None:
            params.append(("detectionModel", self.detection_model))
        if self.recognition_model is not None:
            params.append(("recognitionModel", self.recognition_model))
        if self.attributes:
            params.append(("returnFaceAttributes", ",".join(self.attributes)))
        return params


PROFILE_REGISTRY: dict[str, DetectionProfile] = {
    "recognition_04": DetectionProfile(
        name="recognition_04",
        detection_model=None,
        recognition_model="recognition_04",
        return_face_id=True,
        attributes=("age", "emotion", "smile", "facialHair", "glasses"),
    ),
    "detection_03": DetectionProfile(
        name="detection_03",
        detection_model="detection_03",
        recognition_model="recognition_04",
        return_face_id=True,
        attributes=("headPose", "mask", "qualityForRecognition"),
    ),
}


def get_profile(name: str) -> DetectionProfile:
    """Look up a registered profile by name."""
    try:
        return PROFILE_REGISTRY[name]
    except KeyError:
        msg = f"Unknown detection profile: {name}"
        raise KeyError(msg) from None


def build_detect_url(endpoint: str, profile: DetectionProfile) -> str:
    """Join the configured endpoint, the detect path and the profile's query string.

    A single trailing slash on the endpoint is dropped. Commas in the attribute
    list are kept literal.
    """
    base = endpoint.removesuffix("/")
    query = "&".join(f"{key}={value}" for key, value in profile.query_params())
    return f"{base}{DETECT_PATH}?{query}"
