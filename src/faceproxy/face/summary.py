"""Human-readable digests of detected faces."""

from __future__ import annotations

import math
from typing import Any

from faceproxy.api.schemas import FaceSummary


def _percent(value: float) -> str:
    return f"{value * 100:.1f}%"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _format_number(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _is_score(value: Any) -> bool:
    """Provider confidences are real numbers in [0, 1]."""
    return isinstance(value, int | float) and not isinstance(value, bool) and 0 <= value <= 1


def describe_attributes(attributes: dict[str, Any]) -> list[str]:
    """Return summary lines for the attributes present on a face.

    Lines appear in a fixed order: age, smile, glasses, facial hair, top emotion.
    Attributes of an unexpected shape are left out.
    """
    details: list[str] = []

    age = attributes.get("age")
    if age is not None:
        details.append(f"Estimated age: {_format_number(age)}")

    smile = attributes.get("smile")
    if _is_score(smile):
        details.append(f"Smile score: {_percent(smile)}")

    glasses = attributes.get("glasses")
    if glasses:
        details.append(f"Glasses: {glasses}")

    facial_hair = attributes.get("facialHair")
    if facial_hair and isinstance(facial_hair, dict):
        parts = []
        for kind in ("moustache", "beard", "sideburns"):
            score = facial_hair.get(kind, 0)
            parts.append(f"{_round_half_up(score * 100) if _is_score(score) else 0}%")
        details.append(f"Facial hair (moustache/beard/sideburns): {' / '.join(parts)}")

    emotion = attributes.get("emotion")
    if isinstance(emotion, dict):
        scores = [(name, score) for name, score in emotion.items() if _is_score(score)]
        if scores:
            # max() keeps the first of equal scores
            name, confidence = max(scores, key=lambda item: item[1])
            details.append(f"Top emotion: {name} ({_percent(confidence)})")

    return details


def summarize_faces(payload: Any) -> list[FaceSummary]:
    """Summarize a provider payload; anything other than a list yields no faces."""
    if not isinstance(payload, list):
        return []

    summaries: list[FaceSummary] = []
    for face in payload:
        if not isinstance(face, dict):
            continue
        attributes = face.get("faceAttributes") or {}
        summaries.append(
            FaceSummary(
                id=face.get("faceId"),
                rectangle=face.get("faceRectangle"),
                summary=describe_attributes(attributes) if isinstance(attributes, dict) else [],
            )
        )
    return summaries
