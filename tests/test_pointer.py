from __future__ import annotations

import math

import pytest

from sleepdial.config import DialConfig
from sleepdial.models import Point
from sleepdial.pointer import RingBounds, minutes_from_pointer, pointer_angle


def test_origin_offsets_bounding_box_by_ring_centre() -> None:
    bounds = RingBounds(left=40.0, top=25.0, width=300.0, height=300.0)
    assert bounds.origin(DialConfig()) == Point(190.0, 175.0)


def test_pointer_angle_uses_screen_axes() -> None:
    origin = Point(0.0, 0.0)
    assert pointer_angle(Point(10.0, 0.0), origin) == pytest.approx(0.0)
    assert pointer_angle(Point(0.0, 10.0), origin) == pytest.approx(math.pi / 2)
    assert pointer_angle(Point(0.0, -10.0), origin) == pytest.approx(-math.pi / 2)


@pytest.mark.parametrize(
    "point, minutes",
    [
        (Point(190.0, 55.0), 0),  # straight up
        (Point(310.0, 175.0), 360),  # right
        (Point(190.0, 295.0), 720),  # down
        (Point(70.0, 175.0), 1080),  # left
        (Point(70.0, 55.0), 1260),  # upper left
    ],
)
def test_minutes_from_pointer_reads_clock_face(point: Point, minutes: int) -> None:
    origin = RingBounds(40.0, 25.0, 300.0, 300.0).origin(DialConfig())
    assert minutes_from_pointer(point, origin) == minutes
