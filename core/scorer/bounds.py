"""
Match score bounds shared by the initial scorers and the refiner.
"""
import math
from typing import Any

from core.errors import InvalidScoreError

MIN_SCORE = 0.0
MAX_SCORE = 100.0


def validate_score(value: Any) -> float:
    """Return ``value`` as a float in [0, 100] or raise InvalidScoreError."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidScoreError(f"Match score must be a number, got {type(value).__name__}")
    score = float(value)
    if math.isnan(score) or not MIN_SCORE <= score <= MAX_SCORE:
        raise InvalidScoreError(f"Match score must be within [0, 100], got {value}")
    return score


def clamp_score(value: float) -> float:
    return max(MIN_SCORE, min(MAX_SCORE, float(value)))
