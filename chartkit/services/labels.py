"""
Axis labels for line-type charts.

Y axis: ``number_of_labels + 1`` evenly spaced values from the chart
minimum to the chart maximum, or the chart's custom strings.

X axis: one label per data point, or the chart-level label list.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List

from chartkit.models.styles import LabelsFromKind, YAxisLabelType
from chartkit.services.helpers import format_value

if TYPE_CHECKING:
    from chartkit.services.charts.base import BaseLineChartData

logger = logging.getLogger(__name__)


def y_axis_values(min_value: float, data_range: float, number_of_labels: int) -> List[float]:
    """Bottom-to-top tick values, both ends included."""
    if number_of_labels < 1:
        raise ValueError("number_of_labels must be at least 1")
    step = data_range / number_of_labels
    return [min_value + step * i for i in range(number_of_labels + 1)]


def y_axis_labels(chart: "BaseLineChartData") -> List[str]:
    """Formatted y axis labels, bottom to top."""
    style = chart.chart_style
    if style.y_axis_label_type == YAxisLabelType.CUSTOM:
        if not chart.y_axis_labels:
            logger.warning("[labels] custom y axis labels requested but none were given")
        return list(chart.y_axis_labels or [])

    values = y_axis_values(chart.min_value, chart.range, style.y_axis_number_of_labels)
    return [format_value(v, chart.info_view.touch_specifier) for v in values]


def x_axis_labels(chart: "BaseLineChartData") -> Dict[str, Any]:
    """
    X axis labels plus the rotation to draw them with.

    Returns:
        ``{"labels": [...], "rotation": degrees}``
    """
    labels_from = chart.chart_style.x_axis_labels_from
    if labels_from.kind == LabelsFromKind.DATA_POINT:
        labels = [p.wrapped_x_axis_label for p in chart.data_sets.data_points]
        return {"labels": labels, "rotation": labels_from.rotation}

    return {"labels": list(chart.x_axis_labels or []), "rotation": 0.0}
