"""Translate device-space pointer positions into clock minutes."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .config import DEFAULT_CONFIG, DialConfig
from .models import Point
from .timemath import TOTAL_MINUTES, minutes_from_angle


@dataclass(frozen=True)
class RingBounds:
    """On-screen rectangle of the ring as reported by the rendering layer."""

    left: float
    top: float
    width: float
    height: float

    def origin(self, config: DialConfig = DEFAULT_CONFIG) -> Point:
        return Point(self.left + config.center_x, self.top + config.center_y)


def pointer_angle(point: Point, origin: Point) -> float:
    """Angle of ``point`` around ``origin`` in radians, zero on the +x axis."""
    return math.atan2(point.y - origin.y, point.x - origin.x)


def minutes_from_pointer(point: Point, origin: Point, total: int = TOTAL_MINUTES) -> int:
    return minutes_from_angle(pointer_angle(point, origin), total)


__all__ = ["RingBounds", "minutes_from_pointer", "pointer_angle"]
