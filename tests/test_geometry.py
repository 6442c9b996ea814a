from __future__ import annotations

import pytest

from sleepdial.config import DialConfig
from sleepdial.geometry import compute_geometry, hit_test, point_on_ring
from sleepdial.models import DragTarget, Point

CONFIG = DialConfig()


def test_snapshot_positions_overnight_interval() -> None:
    snapshot = compute_geometry(1380, 480, CONFIG)

    assert snapshot.duration == 540
    assert snapshot.large_arc == 0
    # 08:00 sits two hours past the three o'clock position, below and right of centre
    assert snapshot.end_point.x == pytest.approx(150 + 120 * 0.8660254, rel=1e-6)
    assert snapshot.end_point.y == pytest.approx(150 + 120 * 0.5, rel=1e-6)
    # 23:00 sits just left of the top
    assert snapshot.start_point.x < 150
    assert snapshot.start_point.y < 150 - 110


def test_large_arc_flag_follows_clockwise_span() -> None:
    assert compute_geometry(0, 600, CONFIG).large_arc == 0
    assert compute_geometry(0, 720, CONFIG).large_arc == 0
    assert compute_geometry(0, 900, CONFIG).large_arc == 1
    assert compute_geometry(600, 0, CONFIG).large_arc == 1


def test_snapshot_is_memoized_by_input() -> None:
    assert compute_geometry(1380, 480, CONFIG) is compute_geometry(1380, 480, CONFIG)


def test_svg_path_describes_clockwise_arc() -> None:
    snapshot = compute_geometry(0, 360, CONFIG)
    path = snapshot.svg_path()
    assert path.startswith("M 150.0 30.0 A 120.0 120.0 0 0 1 ")
    assert path.endswith(f"{snapshot.end_point.x} {snapshot.end_point.y}")


def test_point_on_ring() -> None:
    point = point_on_ring(0.0, 100.0, CONFIG)
    assert point == Point(250.0, 150.0)


def test_hit_test_prefers_handles() -> None:
    snapshot = compute_geometry(1380, 480, CONFIG)
    start = snapshot.start_point
    end = snapshot.end_point

    assert hit_test(snapshot, start, CONFIG) is DragTarget.START_HANDLE
    assert hit_test(snapshot, Point(end.x + 3, end.y - 3), CONFIG) is DragTarget.END_HANDLE


def test_hit_test_arc_body_only_inside_interval() -> None:
    snapshot = compute_geometry(1380, 480, CONFIG)

    # midnight, on the arc
    assert hit_test(snapshot, Point(150, 30), CONFIG) is DragTarget.ARC_BODY
    # midnight, inside the stroke but off-centre
    assert hit_test(snapshot, Point(150, 40), CONFIG) is DragTarget.ARC_BODY
    # noon is outside the 23:00-08:00 window
    assert hit_test(snapshot, Point(150, 270), CONFIG) is None
    # the dial centre is nowhere near the arc
    assert hit_test(snapshot, Point(150, 150), CONFIG) is None
