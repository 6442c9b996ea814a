"""Keep the interval duration within the configured limits."""

from __future__ import annotations

from typing import Optional

from .config import DEFAULT_CONFIG, DialConfig
from .models import Endpoint
from .timemath import duration, normalize


def is_valid_interval(start: int, end: int, config: DialConfig = DEFAULT_CONFIG) -> bool:
    span = duration(start, end, config.total_minutes)
    return config.min_duration <= span <= config.max_duration


def clamp_interval(
    start: int,
    end: int,
    moved: Optional[Endpoint],
    config: DialConfig = DEFAULT_CONFIG,
) -> tuple[int, int]:
    """Return ``(start, end)`` with its duration pulled back into ``[min, max]``.

    ``moved`` names the endpoint that was just repositioned. With the default
    ``clamp_absorber="other"`` that endpoint stays where the pointer put it and
    the opposite endpoint is shifted to restore the exact limit. ``None`` means
    the interval was translated as a whole and is passed through untouched.
    """
    total = config.total_minutes
    start = normalize(start, total)
    end = normalize(end, total)
    if moved is None:
        return start, end

    span = duration(start, end, total)
    if span < config.min_duration:
        target = config.min_duration
    elif span > config.max_duration:
        target = config.max_duration
    else:
        return start, end

    pin_start = moved is Endpoint.START
    if config.clamp_absorber == "moved":
        pin_start = not pin_start
    if pin_start:
        return start, normalize(start + target, total)
    return normalize(end - target, total), end


__all__ = ["clamp_interval", "is_valid_interval"]
