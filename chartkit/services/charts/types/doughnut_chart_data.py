"""Chart: Doughnut — a pie chart drawn as a ring of ``stroke_width``."""

from __future__ import annotations

from typing import Any, Dict

from chartkit.models.points import Rect
from chartkit.models.styles import DoughnutChartStyle
from chartkit.services.charts.types.pie_chart_data import PieChartData


class DoughnutChartData(PieChartData):

    @staticmethod
    def _default_style() -> Any:
        return DoughnutChartStyle()

    def _render_data(self, chart_size: Rect) -> Dict[str, Any]:
        data = super()._render_data(chart_size)
        outer = data.pop("radius")
        stroke_width = self.chart_style.stroke_width
        data["outer_radius"] = outer
        data["inner_radius"] = max(outer - stroke_width, 0.0)
        data["stroke_width"] = stroke_width
        return data
