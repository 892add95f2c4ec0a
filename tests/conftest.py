"""Shared fixtures for chartkit tests."""

from __future__ import annotations

import pytest

from chartkit.models.points import (
    LineChartDataPoint,
    PieChartDataPoint,
    RangedLineChartDataPoint,
    Rect,
)
from chartkit.models.sets import LineDataSet, PieDataSet, RangedLineDataSet


@pytest.fixture
def line_set() -> LineDataSet:
    """Four evenly spaced values: 10, 20, 30, 40."""
    return LineDataSet(
        data_points=[
            LineChartDataPoint(value=v, x_axis_label=f"d{i}")
            for i, v in enumerate((10, 20, 30, 40))
        ],
        legend_title="Steps",
    )


@pytest.fixture
def ranged_set() -> RangedLineDataSet:
    return RangedLineDataSet(
        data_points=[
            RangedLineChartDataPoint(value=5, upper_value=8, lower_value=2, description="mon"),
            RangedLineChartDataPoint(value=10, upper_value=15, lower_value=6, description="tue"),
            RangedLineChartDataPoint(value=7, upper_value=9, lower_value=4, description="wed"),
        ],
        legend_title="Heart rate",
        legend_fill_title="Normal range",
    )


@pytest.fixture
def pie_set() -> PieDataSet:
    return PieDataSet(
        data_points=[
            PieChartDataPoint(value=1, description="north-east", colour="#ef4444"),
            PieChartDataPoint(value=1, description="south-east", colour="#22c55e"),
            PieChartDataPoint(value=2, description="west", colour="#3b82f6"),
        ],
        legend_title="Compass",
    )


@pytest.fixture
def square() -> Rect:
    return Rect(width=200, height=200)
