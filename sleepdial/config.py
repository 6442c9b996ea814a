"""Dial dimensions and interval limits, optionally read from an INI file."""

from __future__ import annotations

import configparser
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from .timemath import TOTAL_MINUTES

LOG = logging.getLogger(__name__)

CLAMP_ABSORBERS = ("other", "moved")


@dataclass(frozen=True)
class DialConfig:
    """Named options for the ring. Frozen so derived geometry can be memoized on it."""

    radius: float = 150.0
    center_x: float = 150.0
    center_y: float = 150.0
    arc_radius: float = 120.0
    total_minutes: int = TOTAL_MINUTES
    min_duration: int = 60
    max_duration: int = 1200
    tick_interval: int = 15
    tick_margin: int = 30
    tick_half_length: float = 8.0
    handle_radius: float = 10.0
    arc_stroke_width: float = 30.0
    # "other": the endpoint not under the pointer absorbs a clamp correction.
    # "moved": the endpoint under the pointer is pulled back instead.
    clamp_absorber: str = "other"

    def __post_init__(self) -> None:
        if self.radius <= 0 or self.arc_radius <= 0:
            raise ValueError("radius and arc_radius must be positive.")
        if self.total_minutes <= 0:
            raise ValueError("total_minutes must be positive.")
        if self.tick_interval <= 0:
            raise ValueError("tick_interval must be positive.")
        if self.tick_margin < 0:
            raise ValueError("tick_margin must not be negative.")
        if not 0 < self.min_duration <= self.max_duration <= self.total_minutes:
            raise ValueError(
                "durations must satisfy 0 < min_duration <= max_duration <= total_minutes."
            )
        if self.clamp_absorber not in CLAMP_ABSORBERS:
            raise ValueError(f"clamp_absorber must be one of {CLAMP_ABSORBERS}.")

    @property
    def size(self) -> float:
        """Edge length of the square the ring is drawn in."""
        return self.radius * 2.0

    @classmethod
    def load(cls, ini_path: str | Path | None = None) -> "DialConfig":
        path = Path(ini_path or "sleepdial.ini")
        if not path.exists():
            LOG.debug("No dial config at %s; using defaults", path)
            return cls()

        parser = configparser.ConfigParser()
        parser.read(path)
        cfg = cls()
        overrides: dict[str, Any] = {}

        ring = parser["ring"] if "ring" in parser else None
        if ring:
            radius = ring.getfloat("radius", fallback=cfg.radius)
            overrides["radius"] = radius
            # the ring is centred in its own square unless told otherwise
            overrides["center_x"] = ring.getfloat("center_x", fallback=radius)
            overrides["center_y"] = ring.getfloat("center_y", fallback=radius)
            overrides["arc_radius"] = ring.getfloat("arc_radius", fallback=radius - 30.0)
            overrides["handle_radius"] = ring.getfloat("handle_radius", fallback=cfg.handle_radius)
            overrides["arc_stroke_width"] = ring.getfloat(
                "arc_stroke_width", fallback=cfg.arc_stroke_width
            )

        duration = parser["duration"] if "duration" in parser else None
        if duration:
            overrides["min_duration"] = duration.getint("min", fallback=cfg.min_duration)
            overrides["max_duration"] = duration.getint("max", fallback=cfg.max_duration)
            overrides["clamp_absorber"] = duration.get(
                "clamp_absorber", fallback=cfg.clamp_absorber
            ).strip().lower()

        ticks = parser["ticks"] if "ticks" in parser else None
        if ticks:
            overrides["tick_interval"] = ticks.getint("interval", fallback=cfg.tick_interval)
            overrides["tick_margin"] = ticks.getint("margin", fallback=cfg.tick_margin)
            overrides["tick_half_length"] = ticks.getfloat(
                "half_length", fallback=cfg.tick_half_length
            )

        LOG.debug("Loaded dial config from %s: %s", path, overrides)
        return replace(cfg, **overrides)


DEFAULT_CONFIG = DialConfig()


__all__ = ["CLAMP_ABSORBERS", "DEFAULT_CONFIG", "DialConfig"]
