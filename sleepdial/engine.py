"""Sleep-window engine: owns the interval and runs the drag state machine."""

from __future__ import annotations

import logging
import math
from typing import Callable, Optional, Protocol, Union

from .clamp import clamp_interval
from .config import DEFAULT_CONFIG, DialConfig
from .geometry import compute_geometry
from .models import (
    ArcTranslateDrag,
    DragSession,
    DragState,
    DragTarget,
    Endpoint,
    EndpointDrag,
    GeometrySnapshot,
    Point,
    Tick,
)
from .pointer import RingBounds, minutes_from_pointer, pointer_angle
from .ticks import generate_ticks
from .timemath import (
    angle_delta,
    duration,
    format_clock,
    format_duration,
    minutes_from_angle_delta,
    normalize,
)

LOG = logging.getLogger(__name__)

Listener = Callable[[int, int], None]

DEFAULT_START = 23 * 60
DEFAULT_END = 8 * 60


def _has_position(point: Optional[Point]) -> bool:
    return point is not None and math.isfinite(point.x) and math.isfinite(point.y)


class PointerCapture(Protocol):
    """Keeps move/release events flowing to the engine while a gesture is live."""

    def acquire(self) -> None: ...

    def release(self) -> None: ...


class SleepDialEngine:
    """Single writer of the ``(start, end)`` pair.

    Geometry and ticks are derived on demand from the pair; the drag session
    only lives between a press and the matching release or cancel.
    """

    def __init__(
        self,
        config: Optional[DialConfig] = None,
        start: int = DEFAULT_START,
        end: int = DEFAULT_END,
        capture: Optional[PointerCapture] = None,
    ) -> None:
        self._config = config or DEFAULT_CONFIG
        self._start, self._end = clamp_interval(start, end, Endpoint.START, self._config)
        self._state = DragState.IDLE
        self._session: Optional[DragSession] = None
        self._capture = capture
        self._listeners: list[Listener] = []

    @property
    def config(self) -> DialConfig:
        return self._config

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    @property
    def duration(self) -> int:
        return duration(self._start, self._end, self._config.total_minutes)

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def session(self) -> Optional[DragSession]:
        return self._session

    @property
    def is_dragging(self) -> bool:
        return self._state is not DragState.IDLE

    @property
    def start_label(self) -> str:
        return format_clock(self._start)

    @property
    def end_label(self) -> str:
        return format_clock(self._end)

    @property
    def duration_label(self) -> str:
        return format_duration(self.duration)

    def geometry(self) -> GeometrySnapshot:
        return compute_geometry(self._start, self._end, self._config)

    def ticks(self) -> tuple[Tick, ...]:
        return generate_ticks(self._start, self._end, self._config)

    def set_capture(self, capture: Optional[PointerCapture]) -> None:
        """Install ``capture``; ``None`` detaches the current one and cancels any gesture."""
        if capture is None:
            # the owner of the old capture is gone, so it is dropped without a release
            self._capture = None
            self._end_gesture("detached")
            return
        if self.is_dragging:
            raise RuntimeError("cannot swap pointer capture during a gesture.")
        self._capture = capture

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def set_times(self, start: int, end: int) -> bool:
        """Replace the interval outside of a gesture, clamped as if the start had just moved."""
        if self.is_dragging:
            raise RuntimeError("cannot set times while a gesture is active.")
        return self._apply(*clamp_interval(start, end, Endpoint.START, self._config))

    def press(
        self,
        target: Union[DragTarget, str],
        point: Optional[Point],
        bounds: RingBounds,
    ) -> bool:
        """Begin a gesture on ``target``. Returns ``False`` if nothing started."""
        target = DragTarget.parse(target)
        if self.is_dragging:
            LOG.debug("Ignoring press on %s: %s already active", target.value, self._state.value)
            return False
        if not _has_position(point):
            LOG.debug("Ignoring press on %s without a usable pointer position", target.value)
            return False

        if target is DragTarget.ARC_BODY:
            cfg = self._config
            session: DragSession = ArcTranslateDrag(
                reference_angle=pointer_angle(point, bounds.origin(cfg)),
                reference_start=self._start,
                locked_duration=max(cfg.min_duration, min(cfg.max_duration, self.duration)),
            )
            state = DragState.DRAGGING_ARC
        else:
            which = Endpoint.START if target is DragTarget.START_HANDLE else Endpoint.END
            session = EndpointDrag(which=which)
            state = DragState.DRAGGING_START if which is Endpoint.START else DragState.DRAGGING_END

        self._state = state
        self._session = session
        if self._capture is not None:
            self._capture.acquire()
        LOG.debug("Gesture started: %s", session)
        try:
            if isinstance(session, EndpointDrag):
                self._move_endpoint(session.which, point, bounds)
        except BaseException:
            self._end_gesture("aborted")
            raise
        return True

    def move(self, point: Optional[Point], bounds: RingBounds) -> bool:
        """Apply a pointer move to the active gesture. Returns whether the times changed."""
        session = self._session
        if session is None or not _has_position(point):
            return False
        if isinstance(session, EndpointDrag):
            return self._move_endpoint(session.which, point, bounds)
        return self._move_arc(session, point, bounds)

    def release(self) -> None:
        self._end_gesture("released")

    def cancel(self) -> None:
        self._end_gesture("cancelled")

    def _move_endpoint(self, which: Endpoint, point: Point, bounds: RingBounds) -> bool:
        cfg = self._config
        minute = minutes_from_pointer(point, bounds.origin(cfg), cfg.total_minutes)
        if which is Endpoint.START:
            candidate = (minute, self._end)
        else:
            candidate = (self._start, minute)
        return self._apply(*clamp_interval(*candidate, which, cfg))

    def _move_arc(self, session: ArcTranslateDrag, point: Point, bounds: RingBounds) -> bool:
        cfg = self._config
        total = cfg.total_minutes
        delta = angle_delta(pointer_angle(point, bounds.origin(cfg)), session.reference_angle)
        start = normalize(session.reference_start + minutes_from_angle_delta(delta, total), total)
        end = normalize(start + session.locked_duration, total)
        return self._apply(start, end)

    def _apply(self, start: int, end: int) -> bool:
        if (start, end) == (self._start, self._end):
            return False
        self._start, self._end = start, end
        for listener in list(self._listeners):
            listener(start, end)
        return True

    def _end_gesture(self, reason: str) -> None:
        if self._state is DragState.IDLE:
            return
        LOG.debug("Gesture %s at %s-%s", reason, self.start_label, self.end_label)
        self._state = DragState.IDLE
        self._session = None
        if self._capture is not None:
            self._capture.release()


__all__ = ["DEFAULT_END", "DEFAULT_START", "PointerCapture", "SleepDialEngine"]
