"""
chartkit — chart data models, styles, geometry and touch handling for
line, ranged-line, pie and doughnut charts.

Usage::

    from chartkit import LineChartData, LineDataSet, LineChartDataPoint, Point, Rect

    chart = LineChartData(
        LineDataSet([LineChartDataPoint(v) for v in (3, 7, 5)], legend_title="Steps")
    )
    chart.render(Rect(width=300, height=200)).to_dict()
    chart.touch_interaction(Point(160, 40), Rect(width=300, height=200))
"""

from chartkit.models.metadata import ChartMetadata, LegendData
from chartkit.models.points import (
    LineChartDataPoint,
    PieChartDataPoint,
    Point,
    RangedLineChartDataPoint,
    Rect,
)
from chartkit.models.sets import LineDataSet, PieDataSet, RangedLineDataSet
from chartkit.models.styles import (
    Baseline,
    DoughnutChartStyle,
    LabelsFrom,
    LineChartStyle,
    LineStyle,
    PieChartStyle,
    RangedLineStyle,
    Topline,
)
from chartkit.services.charts.engine import chart_engine
from chartkit.services.charts.types.doughnut_chart_data import DoughnutChartData
from chartkit.services.charts.types.line_chart_data import LineChartData
from chartkit.services.charts.types.pie_chart_data import PieChartData
from chartkit.services.charts.types.ranged_line_chart_data import RangedLineChartData

__version__ = "0.1.0"

__all__ = [
    "Baseline",
    "ChartMetadata",
    "DoughnutChartData",
    "DoughnutChartStyle",
    "LabelsFrom",
    "LegendData",
    "LineChartData",
    "LineChartDataPoint",
    "LineChartStyle",
    "LineDataSet",
    "LineStyle",
    "PieChartData",
    "PieChartDataPoint",
    "PieChartStyle",
    "PieDataSet",
    "Point",
    "RangedLineChartData",
    "RangedLineChartDataPoint",
    "RangedLineDataSet",
    "RangedLineStyle",
    "Rect",
    "Topline",
    "chart_engine",
]
