"""
Chart: Ranged line — a centre line inside a filled upper/lower band.

Differences from the plain line chart:
  - The vertical scale spans the lowest lower bound to the highest
    upper bound, so the whole band fits.
  - Touch and markers follow the centre ``value``.
  - Two legend entries: the line and the band fill.
"""

from __future__ import annotations

from typing import Any, Dict

from chartkit.models.metadata import LegendData
from chartkit.models.points import Rect
from chartkit.models.styles import ChartType
from chartkit.services import geometry
from chartkit.services.charts.base import BaseLineChartData


class RangedLineChartData(BaseLineChartData):

    def setup_legends(self) -> None:
        style = self.data_sets.style
        self.legends = [
            LegendData(
                legend=self.data_sets.legend_title,
                colour=style.line_colour,
                stroke_style=style.stroke_style,
                priority=1,
                chart_type=ChartType.LINE,
            ),
            LegendData(
                legend=self.data_sets.legend_fill_title,
                colour=style.fill_colour,
                stroke_style=style.stroke_style,
                priority=2,
                chart_type=ChartType.BAR,
            ),
        ]

    def _render_data(self, chart_size: Rect) -> Dict[str, Any]:
        data = super()._render_data(chart_size)
        min_value, _, data_range = self._value_range()
        uppers = [p.upper_value for p in self.data_sets.data_points]
        lowers = [p.lower_value for p in self.data_sets.data_points]
        data["band"] = {
            "upper": [
                pt.to_dict()
                for pt in geometry.line_points(uppers, chart_size, min_value, data_range)
            ],
            "lower": [
                pt.to_dict()
                for pt in geometry.line_points(lowers, chart_size, min_value, data_range)
            ],
            "fill_colour": self.data_sets.style.fill_colour,
        }
        return data
