"""
Chart: Pie — one slice per data point, sized by share of the total.

Slices start at north and run clockwise.  ``make_data_points()`` assigns
each point its ``start_angle`` / ``amount`` (radians) and must be called
again after the values change.
"""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Any, Dict, List, Optional

from chartkit.models.metadata import ChartMetadata, LegendData
from chartkit.models.points import PieChartDataPoint, Point, Rect
from chartkit.models.sets import PieDataSet
from chartkit.models.styles import ChartType, PieChartStyle
from chartkit.services import geometry
from chartkit.services.charts.base import BaseChartData


class PieChartData(BaseChartData):

    base_chart_type = ChartType.PIE

    def __init__(
        self,
        data_sets: PieDataSet,
        metadata: Optional[ChartMetadata] = None,
        chart_style: Optional[PieChartStyle] = None,
        no_data_text: Optional[str] = None,
    ) -> None:
        super().__init__(
            data_sets=data_sets,
            metadata=metadata,
            chart_style=chart_style or self._default_style(),
            no_data_text=no_data_text,
        )
        self.make_data_points()
        self.setup_legends()

    @staticmethod
    def _default_style() -> Any:
        return PieChartStyle()

    def make_data_points(self) -> None:
        angles = geometry.slice_angles(self.data_sets.values)
        for point, (start, amount) in zip(self.data_sets.data_points, angles):
            point.start_angle = start
            point.amount = amount

    def has_data(self) -> bool:
        return self.data_sets.total() > 0

    def setup_legends(self) -> None:
        self.legends = [
            LegendData(
                legend=point.wrapped_description,
                colour=point.colour,
                priority=1,
                chart_type=ChartType.PIE,
            )
            for point in self.data_sets.data_points
        ]

    def get_data_point(self, touch: Point, chart_size: Rect) -> None:
        points: List[PieChartDataPoint] = []
        degree = geometry.touch_degree(touch, chart_size)
        index = geometry.touched_slice(
            [(p.start_angle, p.amount) for p in self.data_sets.data_points],
            degree,
        )
        if index is not None:
            point = self.data_sets.data_points[index]
            points.append(replace(point, legend_tag=self.data_sets.legend_title))
        self.info_view.touch_overlay_info = points

    # ── Render ───────────────────────────────────────────────────

    def _slices(self) -> List[Dict[str, Any]]:
        total = self.data_sets.total()
        return [
            {
                "description": p.wrapped_description,
                "value": p.value,
                "colour": p.colour,
                "label": p.label,
                "start_degrees": math.degrees(p.start_angle),
                "amount_degrees": math.degrees(p.amount),
                "percentage": round(p.value / total * 100, 2),
            }
            for p in self.data_sets.data_points
        ]

    def _render_data(self, chart_size: Rect) -> Dict[str, Any]:
        return {
            "data_set": self.data_sets.to_dict(),
            "centre": {"x": chart_size.mid_x, "y": chart_size.mid_y},
            "radius": min(chart_size.width, chart_size.height) / 2,
            "total": self.data_sets.total(),
            "slices": self._slices(),
        }
