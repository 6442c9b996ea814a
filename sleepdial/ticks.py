"""Evenly spaced marks inside the margin-trimmed interval."""

from __future__ import annotations

import logging
import math
from functools import lru_cache

from .config import DEFAULT_CONFIG, DialConfig
from .geometry import point_on_ring
from .models import Tick
from .timemath import angle_from_minutes, duration, normalize

LOG = logging.getLogger(__name__)


@lru_cache(maxsize=256)
def generate_ticks(
    start: int, end: int, config: DialConfig = DEFAULT_CONFIG
) -> tuple[Tick, ...]:
    total = config.total_minutes
    margin = config.tick_margin
    if duration(start, end, total) <= 2 * margin:
        return ()

    first = normalize(start + margin, total)
    end_offset = duration(start, normalize(end - margin, total), total)
    inner_radius = config.arc_radius - config.tick_half_length
    outer_radius = config.arc_radius + config.tick_half_length
    # one full turn at most, whatever the bounds say
    max_ticks = math.ceil(total / config.tick_interval)

    ticks: list[Tick] = []
    current = first
    offset = duration(start, current, total)
    while offset <= end_offset:
        if len(ticks) >= max_ticks:
            LOG.debug("Tick generation stopped at the %d tick limit for %s-%s", max_ticks, start, end)
            break
        angle = angle_from_minutes(current, total)
        ticks.append(
            Tick(
                minute=current,
                angle=angle,
                inner=point_on_ring(angle, inner_radius, config),
                outer=point_on_ring(angle, outer_radius, config),
            )
        )
        current = normalize(current + config.tick_interval, total)
        offset = duration(start, current, total)
    return tuple(ticks)


__all__ = ["generate_ticks"]
