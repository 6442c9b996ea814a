"""Ring geometry derived from the ``(start, end)`` pair.

Everything here is a pure function of its arguments, so results are memoized
by input and renderers can ask for them on every paint.
"""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Optional

from .config import DEFAULT_CONFIG, DialConfig
from .models import DragTarget, GeometrySnapshot, Point
from .pointer import minutes_from_pointer
from .timemath import angle_from_minutes, duration, normalize


def point_on_ring(angle: float, radius: float, config: DialConfig = DEFAULT_CONFIG) -> Point:
    return Point(
        config.center_x + radius * math.cos(angle),
        config.center_y + radius * math.sin(angle),
    )


@lru_cache(maxsize=256)
def compute_geometry(
    start: int, end: int, config: DialConfig = DEFAULT_CONFIG
) -> GeometrySnapshot:
    total = config.total_minutes
    start = normalize(start, total)
    end = normalize(end, total)
    start_angle = angle_from_minutes(start, total)
    end_angle = angle_from_minutes(end, total)
    span = (end_angle - start_angle) % (2.0 * math.pi)
    return GeometrySnapshot(
        start=start,
        end=end,
        start_angle=start_angle,
        end_angle=end_angle,
        start_point=point_on_ring(start_angle, config.arc_radius, config),
        end_point=point_on_ring(end_angle, config.arc_radius, config),
        large_arc=1 if span > math.pi else 0,
        duration=duration(start, end, total),
        arc_radius=config.arc_radius,
    )


def hit_test(
    snapshot: GeometrySnapshot, point: Point, config: DialConfig = DEFAULT_CONFIG
) -> Optional[DragTarget]:
    """Return the draggable element under ``point`` (ring-local coordinates)."""
    if math.dist(point, snapshot.start_point) <= config.handle_radius:
        return DragTarget.START_HANDLE
    if math.dist(point, snapshot.end_point) <= config.handle_radius:
        return DragTarget.END_HANDLE

    center = Point(config.center_x, config.center_y)
    if abs(math.dist(point, center) - config.arc_radius) > config.arc_stroke_width / 2.0:
        return None
    minute = minutes_from_pointer(point, center, config.total_minutes)
    if duration(snapshot.start, minute, config.total_minutes) <= snapshot.duration:
        return DragTarget.ARC_BODY
    return None


__all__ = ["compute_geometry", "hit_test", "point_on_ring"]
