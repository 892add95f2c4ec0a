"""Unit tests for value scaling and hit-testing geometry."""

from __future__ import annotations

import math

import pytest

from chartkit.models.points import Point, Rect
from chartkit.models.styles import Baseline, Topline
from chartkit.services import geometry

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("baseline", "top_line", "expected"),
    [
        (Baseline.minimum_value(), Topline.maximum_value(), (2, 10, 8)),
        (Baseline.zero(), Topline.maximum_value(), (0, 10, 10)),
        (Baseline.minimum_with_maximum(of=5), Topline.maximum_value(), (2, 10, 8)),
        (Baseline.minimum_with_maximum(of=1), Topline.maximum_value(), (1, 10, 9)),
        (Baseline.minimum_value(), Topline.maximum_of(20), (2, 20, 18)),
        (Baseline.minimum_value(), Topline.maximum_of(5), (2, 10, 8)),
    ],
)
def test_value_range_applies_baseline_and_topline(baseline, top_line, expected) -> None:
    """Baseline lowers the minimum, topline raises the maximum, never the reverse."""

    assert geometry.value_range(2, 10, baseline, top_line) == expected


@pytest.mark.parametrize(
    ("touch_x", "expected"),
    [
        (0, 0),
        (49, 0),
        (50, 1),
        (149, 1),
        (150, 2),
        (300, 3),
        (-40, 0),
        (-60, 0),
        (350, None),
        (-150, None),
    ],
)
def test_touched_index_snaps_to_nearest_point(touch_x: float, expected) -> None:
    """Four points across 300px are 100px apart; the pointer snaps to the nearest one."""

    assert geometry.touched_index(touch_x, 300, 4) == expected


def test_touched_index_needs_two_points() -> None:
    """A single point has no horizontal spacing, so nothing can be hit."""

    assert geometry.touched_index(0, 300, 1) is None
    assert geometry.touched_index(0, 300, 0) is None
    assert geometry.touched_index(10, 0, 4) is None


def test_x_section_rejects_single_point() -> None:
    with pytest.raises(ValueError):
        geometry.x_section(300, 1)


def test_locate_point_maps_value_to_pixels() -> None:
    """Larger values sit higher up: y is measured from the top edge."""

    rect = Rect(width=200, height=100)
    values = [0, 5, 10]

    assert geometry.locate_point(values, Point(90, 0), rect, 0, 10) == Point(100, 50)
    assert geometry.locate_point(values, Point(200, 0), rect, 0, 10) == Point(200, 0)
    assert geometry.locate_point(values, Point(0, 0), rect, 0, 10) == Point(0, 100)


def test_locate_point_skips_zero_when_ignored() -> None:
    """A zero value is a gap in the line when ignore_zero is set."""

    rect = Rect(width=200, height=100)

    assert geometry.locate_point([0, 5, 10], Point(0, 0), rect, 0, 10, ignore_zero=True) is None


def test_locate_point_outside_area_returns_none() -> None:
    rect = Rect(width=200, height=100)

    assert geometry.locate_point([1, 2, 3], Point(500, 0), rect, 1, 2) is None


def test_flat_data_sits_on_baseline() -> None:
    """A zero range puts every point on the bottom edge instead of dividing by zero."""

    points = geometry.line_points([4, 4, 4], Rect(width=100, height=80), 4, 0)

    assert [p.y for p in points] == [80, 80, 80]
    assert [p.x for p in points] == [0, 50, 100]


def test_line_points_single_value_on_left_edge() -> None:
    points = geometry.line_points([4], Rect(width=100, height=80), 0, 4)

    assert points == [Point(0, 0)]


def test_slice_angles_start_north_and_cover_full_circle() -> None:
    angles = geometry.slice_angles([1, 1, 2])

    starts = [start for start, _ in angles]
    amounts = [amount for _, amount in angles]
    assert starts == pytest.approx([-math.pi / 2, 0, math.pi / 2])
    assert amounts == pytest.approx([math.pi / 2, math.pi / 2, math.pi])
    assert sum(amounts) == pytest.approx(2 * math.pi)


def test_slice_angles_zero_total_gives_empty_slices() -> None:
    assert geometry.slice_angles([0, 0]) == [(-math.pi / 2, 0.0), (-math.pi / 2, 0.0)]


def test_slice_angles_rejects_negative_values() -> None:
    with pytest.raises(ValueError):
        geometry.slice_angles([1, -1])


@pytest.mark.parametrize(
    ("touch", "expected"),
    [
        (Point(100, 0), -90),
        (Point(200, 100), 0),
        (Point(100, 200), 90),
        (Point(0, 100), 180),
        (Point(150, 50), -45),
        (Point(150, 150), 45),
    ],
)
def test_touch_degree_runs_clockwise_from_north(touch: Point, expected: float, square: Rect) -> None:
    """North is -90°, east 0°, south 90°, west 180°."""

    assert geometry.touch_degree(touch, square) == pytest.approx(expected)


def test_touched_slice_finds_arc_under_pointer(square: Rect) -> None:
    angles = geometry.slice_angles([1, 1, 2])

    assert geometry.touched_slice(angles, geometry.touch_degree(Point(150, 50), square)) == 0
    assert geometry.touched_slice(angles, geometry.touch_degree(Point(150, 150), square)) == 1
    assert geometry.touched_slice(angles, geometry.touch_degree(Point(0, 100), square)) == 2


def test_touched_slice_ignores_empty_slices() -> None:
    angles = geometry.slice_angles([0, 0])

    assert geometry.touched_slice(angles, -90) is None


def test_grid_positions_include_both_edges() -> None:
    assert geometry.vertical_grid_positions(300, 4) == [0, 100, 200, 300]
    assert geometry.horizontal_grid_positions(90, 4) == [0, 30, 60, 90]
    assert geometry.vertical_grid_positions(300, 1) == []


def test_vertical_grid_view_is_deprecated() -> None:
    with pytest.deprecated_call():
        assert geometry.vertical_grid_view(300, 4) == [0, 100, 200, 300]
