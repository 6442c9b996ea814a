"""Value types shared by the dial engine, geometry helpers and the Qt front end."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Union


class Point(NamedTuple):
    """A position in the collaborator's coordinate space."""

    x: float
    y: float


class Endpoint(Enum):
    """Which end of the interval a gesture controls."""

    START = "start"
    END = "end"


class DragTarget(Enum):
    """Hit regions that can begin a gesture."""

    START_HANDLE = "start-handle"
    END_HANDLE = "end-handle"
    ARC_BODY = "arc-body"

    @classmethod
    def parse(cls, value: Union[str, "DragTarget"]) -> "DragTarget":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"unknown drag target: {value!r}") from None


class DragState(Enum):
    IDLE = "idle"
    DRAGGING_START = "dragging-start"
    DRAGGING_END = "dragging-end"
    DRAGGING_ARC = "dragging-arc"


@dataclass(frozen=True)
class EndpointDrag:
    """Gesture moving a single handle; the pointer decides its time on every update."""

    which: Endpoint


@dataclass(frozen=True)
class ArcTranslateDrag:
    """Gesture rotating the whole interval, captured once at press time."""

    reference_angle: float
    reference_start: int
    locked_duration: int


DragSession = Union[EndpointDrag, ArcTranslateDrag]


@dataclass(frozen=True)
class Tick:
    """Radial mark drawn inside the margin-trimmed interval."""

    minute: int
    angle: float
    inner: Point
    outer: Point

    @property
    def key(self) -> str:
        return f"tick-{self.minute}"


@dataclass(frozen=True)
class GeometrySnapshot:
    """Pre-resolved ring coordinates for the current interval."""

    start: int
    end: int
    start_angle: float
    end_angle: float
    start_point: Point
    end_point: Point
    large_arc: int
    duration: int
    arc_radius: float

    def svg_path(self) -> str:
        """Return the interval as an SVG elliptical-arc path, drawn clockwise."""
        r = self.arc_radius
        return (
            f"M {self.start_point.x} {self.start_point.y} "
            f"A {r} {r} 0 {self.large_arc} 1 {self.end_point.x} {self.end_point.y}"
        )


__all__ = [
    "ArcTranslateDrag",
    "DragSession",
    "DragState",
    "DragTarget",
    "Endpoint",
    "EndpointDrag",
    "GeometrySnapshot",
    "Point",
    "Tick",
]
