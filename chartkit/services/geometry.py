"""
Chart geometry — value scaling and hit-testing.

All functions are pure: plain numbers in, plain numbers (or ``Point``)
out.  Pixel space has its origin at the top-left of the drawing area
and y grows downwards, so larger values sit higher (smaller y).

Line charts
-----------
For ``count`` data points across a drawing area of ``width`` x ``height``::

    x_section = width / (count - 1)          # px between indices
    y_section = height / range               # px per unit of value
    index     = int((touch_x + x_section / 2) / x_section)
    point     = (index * x_section, height - (value - min_value) * y_section)

The ``+ x_section / 2`` term snaps the pointer to the nearest index
instead of the one to its left.

Pie charts
----------
Slices start at north (-π/2) and run clockwise.  Pointer angles are
reported in degrees in [-90, 270) so they compare directly with the
slice start angles.
"""

from __future__ import annotations

import math
import warnings
from typing import List, Optional, Sequence, Tuple

from chartkit.models.points import Point, Rect
from chartkit.models.styles import Baseline, BaselineKind, Topline, ToplineKind


# ── Value range ──────────────────────────────────────────────────

def value_range(
    data_min: float,
    data_max: float,
    baseline: Baseline,
    top_line: Topline,
) -> Tuple[float, float, float]:
    """
    Apply baseline / topline settings to the data extent.

    Returns:
        ``(min_value, max_value, range)``.
    """
    if baseline.kind == BaselineKind.ZERO:
        min_value = 0.0
    elif baseline.kind == BaselineKind.MINIMUM_WITH_MAXIMUM:
        min_value = min(data_min, baseline.value if baseline.value is not None else data_min)
    else:
        min_value = data_min

    if top_line.kind == ToplineKind.MAXIMUM_OF and top_line.value is not None:
        max_value = max(data_max, top_line.value)
    else:
        max_value = data_max

    return min_value, max_value, max_value - min_value


# ── Sections ─────────────────────────────────────────────────────

def x_section(width: float, count: int) -> float:
    """Horizontal distance between two consecutive data indices."""
    if count < 2:
        raise ValueError(f"At least two data points are needed, got {count}")
    return width / (count - 1)


def y_section(height: float, data_range: float) -> float:
    """Pixels per unit of value; ``0`` for a flat (zero-range) data set."""
    if data_range == 0:
        return 0.0
    return height / data_range


# ── Line hit-testing ─────────────────────────────────────────────

def touched_index(touch_x: float, width: float, count: int) -> Optional[int]:
    """
    Index of the data point nearest to *touch_x*, or ``None``.

    ``None`` is returned for fewer than two points, a zero-width area,
    or a pointer that falls outside ``0 <= index < count``.
    """
    if count < 2 or width <= 0:
        return None
    section = x_section(width, count)
    # int() truncates toward zero, so slightly negative touches map to 0
    index = int((touch_x + section / 2) / section)
    if 0 <= index < count:
        return index
    return None


def point_location(
    value: float,
    index: int,
    min_value: float,
    x_sec: float,
    y_sec: float,
    height: float,
) -> Point:
    """Pixel position of *value* drawn at *index*."""
    return Point(x=index * x_sec, y=(value - min_value) * -y_sec + height)


def locate_point(
    values: Sequence[float],
    touch: Point,
    chart_size: Rect,
    min_value: float,
    data_range: float,
    ignore_zero: bool = False,
) -> Optional[Point]:
    """
    Pixel position of the data point under *touch*.

    With *ignore_zero* a zero value is treated as a gap and yields ``None``.
    """
    index = touched_index(touch.x, chart_size.width, len(values))
    if index is None:
        return None
    if ignore_zero and values[index] == 0:
        return None
    return point_location(
        values[index],
        index,
        min_value,
        x_section(chart_size.width, len(values)),
        y_section(chart_size.height, data_range),
        chart_size.height,
    )


def line_points(
    values: Sequence[float],
    chart_size: Rect,
    min_value: float,
    data_range: float,
) -> List[Point]:
    """Pixel position of every value; a single value sits on the left edge."""
    if not values:
        return []
    x_sec = x_section(chart_size.width, len(values)) if len(values) > 1 else 0.0
    y_sec = y_section(chart_size.height, data_range)
    return [
        point_location(v, i, min_value, x_sec, y_sec, chart_size.height)
        for i, v in enumerate(values)
    ]


# ── Pie hit-testing ──────────────────────────────────────────────

def slice_angles(values: Sequence[float]) -> List[Tuple[float, float]]:
    """
    ``(start_angle, amount)`` in radians for each slice.

    A zero total gives zero-width slices, none of which can be hit.
    """
    if any(v < 0 for v in values):
        raise ValueError("Pie chart values must be non-negative")

    total = sum(values)
    start = -math.pi / 2
    angles: List[Tuple[float, float]] = []
    for value in values:
        amount = math.pi * 2 * (value / total) if total else 0.0
        angles.append((start, amount))
        start += amount
    return angles


def touch_degree(touch: Point, chart_size: Rect) -> float:
    """Angle of *touch* about the centre of *chart_size*, in [-90, 270)."""
    dx = touch.x - chart_size.mid_x
    dy = touch.y - chart_size.mid_y
    degrees = math.degrees(math.atan2(-dx, -dy))
    if degrees > 0:
        return 270 - degrees
    return -90 - degrees


def touched_slice(
    angles: Sequence[Tuple[float, float]],
    degree: float,
) -> Optional[int]:
    """Index of the first slice whose arc contains *degree*."""
    for idx, (start, amount) in enumerate(angles):
        if amount == 0:
            continue
        start_deg = math.degrees(start)
        if start_deg <= degree <= start_deg + math.degrees(amount):
            return idx
    return None


# ── Grid ─────────────────────────────────────────────────────────

def _even_positions(length: float, number_of_lines: int) -> List[float]:
    if number_of_lines < 2:
        return []
    step = length / (number_of_lines - 1)
    return [i * step for i in range(number_of_lines)]


def vertical_grid_positions(width: float, number_of_lines: int) -> List[float]:
    """X positions of the vertical grid lines, both edges included."""
    return _even_positions(width, number_of_lines)


def horizontal_grid_positions(height: float, number_of_lines: int) -> List[float]:
    """Y positions of the horizontal grid lines, both edges included."""
    return _even_positions(height, number_of_lines)


def vertical_grid_view(width: float, number_of_lines: int) -> List[float]:
    warnings.warn(
        'vertical_grid_view is deprecated. Use the "grid" section of the rendered chart instead',
        DeprecationWarning,
        stacklevel=2,
    )
    return vertical_grid_positions(width, number_of_lines)
