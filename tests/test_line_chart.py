"""Unit tests for LineChartData: derived values, touch and render output."""

from __future__ import annotations

import pandas as pd
import pytest

from chartkit.models.metadata import ChartMetadata
from chartkit.models.points import LineChartDataPoint, Point, Rect
from chartkit.models.sets import LineDataSet
from chartkit.models.styles import (
    Baseline,
    ChartType,
    DataSetType,
    InfoBoxPlacement,
    LabelsFrom,
    LineChartStyle,
    LineStyle,
    PieChartStyle,
    Topline,
    YAxisLabelType,
)
from chartkit.services.charts.types.line_chart_data import LineChartData

pytestmark = pytest.mark.unit


def test_derived_values_follow_data_extent(line_set: LineDataSet) -> None:
    chart = LineChartData(line_set)

    assert chart.min_value == 10
    assert chart.max_value == 40
    assert chart.range == 30
    assert chart.average == 25
    assert chart.chart_type == (ChartType.LINE, DataSetType.SINGLE)


def test_zero_baseline_and_custom_topline(line_set: LineDataSet) -> None:
    chart = LineChartData(
        line_set,
        chart_style=LineChartStyle(baseline=Baseline.zero(), top_line=Topline.maximum_of(50)),
    )

    assert chart.min_value == 0
    assert chart.max_value == 50
    assert chart.range == 50


def test_get_point_location_snaps_to_nearest_index(line_set: LineDataSet) -> None:
    """300px wide → 100px per index; 150px tall over a range of 30 → 5px per unit."""

    chart = LineChartData(line_set)

    location = chart.get_point_location(Point(110, 0), Rect(width=300, height=150))

    assert location == Point(100, 100)


def test_get_data_point_tags_legend(line_set: LineDataSet) -> None:
    chart = LineChartData(line_set)

    chart.get_data_point(Point(260, 0), Rect(width=300, height=150))

    [point] = chart.info_view.touch_overlay_info
    assert point.value == 40
    assert point.legend_tag == "Steps"


def test_touch_outside_chart_returns_nothing(line_set: LineDataSet) -> None:
    chart = LineChartData(line_set)

    result = chart.touch_interaction(Point(400, 0), Rect(width=300, height=150))

    assert result.points == []
    assert result.location is None
    assert chart.info_view.is_touch_current is True


def test_touch_interaction_and_touch_ended(line_set: LineDataSet) -> None:
    chart = LineChartData(line_set)
    rect = Rect(width=300, height=150)

    result = chart.touch_interaction(Point(10, 0), rect)

    assert [p.value for p in result.points] == [10]
    assert result.location == Point(0, 150)
    assert result.to_dict()["location"] == {"x": 0, "y": 150}

    chart.touch_ended()
    assert chart.info_view.touch_overlay_info == []
    assert chart.info_view.is_touch_current is False


def test_ignore_zero_excludes_zero_from_minimum_and_touch() -> None:
    data_set = LineDataSet(
        data_points=[LineChartDataPoint(v) for v in (0, 5, 10)],
        style=LineStyle(ignore_zero=True),
    )
    chart = LineChartData(data_set)
    rect = Rect(width=200, height=100)

    assert chart.min_value == 5
    assert chart.get_point_location(Point(0, 0), rect) is None
    chart.get_data_point(Point(0, 0), rect)
    assert chart.info_view.touch_overlay_info == []


def test_legend_uses_line_colour(line_set: LineDataSet) -> None:
    line_set.style = LineStyle(line_colour="#ef4444")
    chart = LineChartData(line_set)

    [legend] = chart.legends
    assert legend.legend == "Steps"
    assert legend.colour == "#ef4444"
    assert legend.chart_type == ChartType.LINE
    assert legend.priority == 1


def test_render_produces_points_labels_and_grid(line_set: LineDataSet) -> None:
    chart = LineChartData(line_set, metadata=ChartMetadata(title="Daily steps"))

    result = chart.render(Rect(width=300, height=150)).to_dict()

    assert result["chart_name"] == "Daily steps"
    assert result["chart_type"] == "line"
    data = result["data"]
    assert data["points"] == [
        {"x": 0, "y": 150},
        {"x": 100, "y": 100},
        {"x": 200, "y": 50},
        {"x": 300, "y": 0},
    ]
    assert data["range"] == {"min": 10, "max": 40, "range": 30, "average": 25}
    assert data["y_axis"]["labels"][0] == "10"
    assert data["y_axis"]["labels"][-1] == "40"
    assert len(data["y_axis"]["labels"]) == 11
    assert data["x_axis"]["labels"] == ["d0", "d1", "d2", "d3"]
    assert len(data["grid"]["vertical"]) == 10
    assert data["grid"]["vertical"][-1] == pytest.approx(300)
    assert data["legends"][0]["legend"] == "Steps"
    assert data["style"]["baseline"] == {"kind": "minimum_value", "value": None}


def test_render_without_enough_data_is_empty() -> None:
    chart = LineChartData(LineDataSet([LineChartDataPoint(3)]))

    result = chart.render(Rect(width=300, height=150))

    assert result.data is None
    assert result.metadata == {"empty": True, "message": "No Data"}


def test_custom_no_data_text() -> None:
    chart = LineChartData(LineDataSet([]), no_data_text="Nothing yet")

    assert chart.render(Rect(width=10, height=10)).metadata["message"] == "Nothing yet"


def test_x_axis_labels_from_chart_data(line_set: LineDataSet) -> None:
    chart = LineChartData(
        line_set,
        x_axis_labels=["Q1", "Q2"],
        chart_style=LineChartStyle(x_axis_labels_from=LabelsFrom.chart_data()),
    )

    data = chart.render(Rect(width=300, height=150)).data

    assert data["x_axis"] == {"labels": ["Q1", "Q2"], "rotation": 0.0, "position": "bottom", "title": None}


def test_custom_y_axis_labels(line_set: LineDataSet) -> None:
    chart = LineChartData(
        line_set,
        y_axis_labels=["low", "high"],
        chart_style=LineChartStyle(y_axis_label_type=YAxisLabelType.CUSTOM),
    )

    assert chart.render(Rect(width=300, height=150)).data["y_axis"]["labels"] == ["low", "high"]


def test_deprecated_info_box_fields_warn(line_set: LineDataSet) -> None:
    style = LineChartStyle()

    with pytest.deprecated_call():
        assert style.info_box_placement == InfoBoxPlacement.FLOATING
    with pytest.deprecated_call():
        style.info_box_placement = InfoBoxPlacement.HEADER
    with pytest.deprecated_call():
        assert style.info_box_placement == InfoBoxPlacement.HEADER


def test_style_rejects_zero_labels() -> None:
    with pytest.raises(ValueError):
        LineChartStyle(y_axis_number_of_labels=0)


def test_data_set_from_series_drops_nan() -> None:
    series = pd.Series([1.0, None, 3.0], index=["a", "b", "c"], name="temp")

    data_set = LineDataSet.from_series(series)

    assert data_set.values == [1.0, 3.0]
    assert [p.wrapped_x_axis_label for p in data_set.data_points] == ["a", "c"]
    assert data_set.legend_title == "temp"


def test_data_set_from_series_formats_datetime_index() -> None:
    index = pd.date_range("2024-03-01", periods=3, freq="h")
    series = pd.Series([4, 5, 6], index=index)

    data_set = LineDataSet.from_series(series, legend_title="Load")

    assert [p.x_axis_label for p in data_set.data_points] == [
        "01/03 00:00",
        "01/03 01:00",
        "01/03 02:00",
    ]
    assert data_set.data_points[0].date.hour == 0
    assert data_set.legend_title == "Load"


def test_to_dict_describes_chart(line_set: LineDataSet) -> None:
    payload = LineChartData(line_set).to_dict()

    assert payload["chart_name"] == "LineChartData"
    assert payload["chart_type"] == "line"
    assert payload["data_set_type"] == "single"
    assert payload["data_sets"]["legend_title"] == "Steps"
    assert len(payload["data_sets"]["data_points"]) == 4


def test_touched_point_is_a_tagged_copy(line_set: LineDataSet) -> None:
    """The stored data point keeps its own legend tag."""

    chart = LineChartData(line_set)

    [point] = chart.touch_interaction(Point(0, 0), Rect(width=300, height=150)).points

    assert point.legend_tag == "Steps"
    assert point.id == line_set.data_points[0].id
    assert line_set.data_points[0].legend_tag == ""


def test_deprecated_border_style_is_per_instance() -> None:
    with pytest.warns(DeprecationWarning):
        first = LineChartStyle()
        first.info_box_border_style.line_width = 9
        other = PieChartStyle().info_box_border_style

    assert other.line_width == 0
