#!/usr/bin/env python3
"""
Gesture Interpreter - turns a drag release into a swipe decision.

A release commits when the horizontal offset OR the horizontal velocity
crosses its threshold, so both a slow long drag and a short fast flick
count. The sign of whichever value crossed its threshold picks the
direction (offset first). Anything else snaps back.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from core.models import SwipeDirection

DEFAULT_DISTANCE_THRESHOLD = 120.0  # px
DEFAULT_VELOCITY_THRESHOLD = 500.0  # px/s


class GestureDecision(str, Enum):
    COMMIT_LEFT = "commit_left"
    COMMIT_RIGHT = "commit_right"
    SNAP_BACK = "snap_back"

    @property
    def direction(self) -> Optional[SwipeDirection]:
        if self is GestureDecision.COMMIT_LEFT:
            return SwipeDirection.LEFT
        if self is GestureDecision.COMMIT_RIGHT:
            return SwipeDirection.RIGHT
        return None


@dataclass(frozen=True)
class GestureInterpreter:
    distance_threshold: float = DEFAULT_DISTANCE_THRESHOLD
    velocity_threshold: float = DEFAULT_VELOCITY_THRESHOLD

    def __post_init__(self):
        if self.distance_threshold <= 0 or self.velocity_threshold <= 0:
            raise ValueError("Gesture thresholds must be positive")

    def interpret(self, offset_x: float, velocity_x: float = 0.0) -> GestureDecision:
        if abs(offset_x) > self.distance_threshold:
            sign = offset_x
        elif abs(velocity_x) > self.velocity_threshold:
            sign = velocity_x
        else:
            return GestureDecision.SNAP_BACK
        return GestureDecision.COMMIT_RIGHT if sign > 0 else GestureDecision.COMMIT_LEFT


def interpret(
    offset_x: float,
    velocity_x: float = 0.0,
    distance_threshold: float = DEFAULT_DISTANCE_THRESHOLD,
    velocity_threshold: float = DEFAULT_VELOCITY_THRESHOLD
) -> GestureDecision:
    return GestureInterpreter(distance_threshold, velocity_threshold).interpret(offset_x, velocity_x)
