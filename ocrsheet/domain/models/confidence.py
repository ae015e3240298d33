"""Recognition confidence levels."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

HIGH_CONFIDENCE = 0.9
MEDIUM_CONFIDENCE = 0.7


class ConfidenceLevel(str, Enum):
    """Coarse bands used when presenting recognition confidence."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def from_score(cls, score: float | None) -> "ConfidenceLevel":
        """Map a score in ``[0, 1]`` to a band, treating None as LOW."""
        if score is None:
            return cls.LOW
        if score >= HIGH_CONFIDENCE:
            return cls.HIGH
        if score >= MEDIUM_CONFIDENCE:
            return cls.MEDIUM
        return cls.LOW


def format_confidence(score: float) -> str:
    """Render a score as a whole-number percentage, e.g. ``0.953 -> "95%"``.

    Exact halves round up, so ``0.125`` is shown as ``"13%"``.
    """
    percent = Decimal(score * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"{percent}%"


__all__ = ["ConfidenceLevel", "format_confidence"]
