"""Chart: Line — a single data set drawn as a line with point markers."""

from __future__ import annotations

from chartkit.models.metadata import LegendData
from chartkit.models.styles import ChartType
from chartkit.services.charts.base import BaseLineChartData


class LineChartData(BaseLineChartData):

    def setup_legends(self) -> None:
        style = self.data_sets.style
        self.legends = [
            LegendData(
                legend=self.data_sets.legend_title,
                colour=style.line_colour,
                stroke_style=style.stroke_style,
                priority=1,
                chart_type=ChartType.LINE,
            )
        ]
