"""Cyclic clock arithmetic: minutes since midnight on a 24 hour ring."""

from __future__ import annotations

import math

TOTAL_MINUTES = 1440
TAU = 2.0 * math.pi
QUARTER_TURN = math.pi / 2.0


def normalize(minutes: int, total: int = TOTAL_MINUTES) -> int:
    """Wrap ``minutes`` into ``[0, total)`` using floored modulo."""
    return minutes % total


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def angle_from_minutes(minutes: int, total: int = TOTAL_MINUTES) -> float:
    """Map a clock minute to radians with minute 0 at the top, growing clockwise."""
    return (normalize(minutes, total) / total) * TAU - QUARTER_TURN


def minutes_from_angle(angle: float, total: int = TOTAL_MINUTES) -> int:
    """Inverse of :func:`angle_from_minutes` for angles measured from the +x axis."""
    # rotate so the clock face starts at the top, then wrap into [0, 2pi)
    turned = (angle + QUARTER_TURN) % TAU
    return normalize(_round_half_up((turned / TAU) * total), total)


def angle_delta(current: float, reference: float) -> float:
    """Signed rotation from ``reference`` to ``current`` wrapped into ``(-pi, pi]``."""
    delta = math.remainder(current - reference, TAU)
    if delta <= -math.pi:
        delta += TAU
    return delta


def minutes_from_angle_delta(delta: float, total: int = TOTAL_MINUTES) -> int:
    return _round_half_up((delta / TAU) * total)


def duration(start: int, end: int, total: int = TOTAL_MINUTES) -> int:
    """Clockwise minutes from ``start`` to ``end``; 0 when they coincide."""
    return normalize(end - start, total)


def format_clock(minutes: int) -> str:
    hours = (minutes // 60) % 24
    mins = minutes % 60
    return f"{hours:02d}:{mins:02d}"


def format_duration(minutes: int) -> str:
    """Render a duration the way the caption shows it, e.g. ``9h 0m``."""
    return f"{minutes // 60}h {minutes % 60}m"


__all__ = [
    "TOTAL_MINUTES",
    "angle_delta",
    "angle_from_minutes",
    "duration",
    "format_clock",
    "format_duration",
    "minutes_from_angle",
    "minutes_from_angle_delta",
    "normalize",
]
