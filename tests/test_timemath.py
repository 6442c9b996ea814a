from __future__ import annotations

import math

import pytest

from sleepdial.timemath import (
    angle_delta,
    angle_from_minutes,
    duration,
    format_clock,
    format_duration,
    minutes_from_angle,
    minutes_from_angle_delta,
    normalize,
)


@pytest.mark.parametrize(
    "raw, expected",
    [(0, 0), (1439, 1439), (1440, 0), (-10, 1430), (-1441, 1439), (3 * 1440 + 75, 75)],
)
def test_normalize_wraps_with_floored_modulo(raw: int, expected: int) -> None:
    assert normalize(raw) == expected


def test_normalize_is_idempotent_and_in_range() -> None:
    for raw in range(-3000, 3000, 7):
        once = normalize(raw)
        assert 0 <= once < 1440
        assert normalize(once) == once


def test_angle_from_minutes_starts_at_top_and_runs_clockwise() -> None:
    assert angle_from_minutes(0) == pytest.approx(-math.pi / 2)
    assert angle_from_minutes(360) == pytest.approx(0.0)
    assert angle_from_minutes(720) == pytest.approx(math.pi / 2)
    assert angle_from_minutes(1080) == pytest.approx(math.pi)


def test_minutes_from_angle_round_trips_every_minute() -> None:
    for minute in range(1440):
        assert minutes_from_angle(angle_from_minutes(minute)) == minute


def test_minutes_from_angle_accepts_atan2_range() -> None:
    # atan2 returns (-pi, pi]; the left half of the upper-left quadrant is evening
    assert minutes_from_angle(math.pi) == 1080
    assert minutes_from_angle(-math.pi) == 1080
    assert minutes_from_angle(-3 * math.pi / 4) == 1260
    assert minutes_from_angle(-math.pi / 2 - 1e-9) == 0


def test_angle_delta_takes_the_short_way_round() -> None:
    assert angle_delta(0.1, -0.1) == pytest.approx(0.2)
    assert angle_delta(-math.pi + 0.1, math.pi - 0.1) == pytest.approx(0.2)
    assert angle_delta(math.pi - 0.1, -math.pi + 0.1) == pytest.approx(-0.2)
    assert angle_delta(math.pi, 0.0) == pytest.approx(math.pi)
    assert angle_delta(-math.pi, 0.0) == pytest.approx(math.pi)


def test_minutes_from_angle_delta() -> None:
    assert minutes_from_angle_delta(math.pi / 6) == 120
    assert minutes_from_angle_delta(-math.pi / 6) == -120


def test_duration_is_clockwise() -> None:
    assert duration(1380, 480) == 540
    assert duration(480, 1380) == 900
    assert duration(100, 100) == 0


@pytest.mark.parametrize("minutes, text", [(75, "01:15"), (0, "00:00"), (1439, "23:59"), (600, "10:00")])
def test_format_clock(minutes: int, text: str) -> None:
    assert format_clock(minutes) == text


def test_format_duration() -> None:
    assert format_duration(540) == "9h 0m"
    assert format_duration(75) == "1h 15m"


def test_huge_angles_wrap_in_a_single_step() -> None:
    assert 0 <= minutes_from_angle(1e17) < 1440
    assert 0 <= minutes_from_angle(-1e17) < 1440
    assert -math.pi < angle_delta(1e17, 0.0) <= math.pi
    assert angle_delta(2 * math.pi * 1000 + 0.25, 0.0) == pytest.approx(0.25)
