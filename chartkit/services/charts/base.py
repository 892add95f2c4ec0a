"""
BaseChartData — Abstract base class for all chart data classes.

Single Responsibility: hold the data, style and touch state of one
chart and turn them into plain numeric results.  Chart data classes
are "dumb processors" — whoever draws the chart receives the output
of ``render()`` / ``touch_interaction()`` and never calls back.

Touch locations and chart sizes are in chart-local pixels: ``(0, 0)``
is the top-left corner of the drawing area.

Usage in a concrete chart::

    from chartkit.services.charts.base import BaseLineChartData

    class LineChartData(BaseLineChartData):
        def setup_legends(self) -> None:
            ...
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple
from uuid import uuid4

from chartkit.core.config import settings
from chartkit.models.metadata import ChartMetadata, ChartViewData, InfoViewData, LegendData
from chartkit.models.points import Point, Rect
from chartkit.models.styles import ChartType, DataSetType, LineChartStyle, style_to_dict
from chartkit.services import geometry, labels

logger = logging.getLogger(__name__)


@dataclass
class ChartResult:
    """
    Standardized output from any chart.

    Serialized to JSON by the API layer.
    """
    chart_id: str
    chart_name: str
    chart_type: str
    data: Any
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chart_id": self.chart_id,
            "chart_name": self.chart_name,
            "chart_type": self.chart_type,
            "data": self.data,
            "metadata": self.metadata,
        }


@dataclass
class TouchResult:
    """Data points under the pointer and where to draw the marker."""
    points: List[Any] = field(default_factory=list)
    location: Optional[Point] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "points": [p.to_dict() for p in self.points],
            "location": self.location.to_dict() if self.location else None,
        }


class BaseChartData(ABC):
    """
    Abstract base class for all chart data classes.

    Subclasses MUST implement:
      - ``has_data()``        → bool
      - ``setup_legends()``   → None
      - ``get_data_point()``  → None (fills ``info_view.touch_overlay_info``)
      - ``_render_data()``    → dict

    May override:
      - ``get_point_location()`` → Point | None (marker position)
    """

    base_chart_type: ChartType = ChartType.LINE
    data_set_type: DataSetType = DataSetType.SINGLE

    def __init__(
        self,
        data_sets: Any,
        metadata: Optional[ChartMetadata] = None,
        chart_style: Any = None,
        no_data_text: Optional[str] = None,
    ) -> None:
        self.id = uuid4()
        self.data_sets = data_sets
        self.metadata = metadata or ChartMetadata()
        self.chart_style = chart_style
        self.no_data_text = no_data_text if no_data_text is not None else settings.NO_DATA_TEXT
        self.legends: List[LegendData] = []
        self.view_data = ChartViewData()
        self.info_view = InfoViewData()

    @property
    def chart_type(self) -> Tuple[ChartType, DataSetType]:
        return self.base_chart_type, self.data_set_type

    @property
    def chart_name(self) -> str:
        return type(self).__name__

    # ── Contract ─────────────────────────────────────────────────

    @abstractmethod
    def has_data(self) -> bool:
        """Return ``True`` if there is enough data to draw the chart."""

    @abstractmethod
    def setup_legends(self) -> None:
        """Populate ``self.legends``."""

    @abstractmethod
    def get_data_point(self, touch: Point, chart_size: Rect) -> None:
        """Store the data points under *touch* in ``info_view.touch_overlay_info``."""

    @abstractmethod
    def _render_data(self, chart_size: Rect) -> Dict[str, Any]:
        """Chart-specific part of the ``render()`` payload."""

    def get_point_location(self, touch: Point, chart_size: Rect) -> Optional[Point]:
        return None

    # ── Touch ────────────────────────────────────────────────────

    def touch_interaction(self, touch: Point, chart_size: Rect) -> TouchResult:
        """
        Handle a pointer at *touch*.

        Updates ``info_view`` and returns what is under the pointer;
        an empty result when nothing is.
        """
        self.info_view.is_touch_current = True
        self.info_view.touch_location = touch
        self.info_view.chart_size = chart_size

        self.get_data_point(touch, chart_size)
        location = self.get_point_location(touch, chart_size)

        logger.debug(
            f"[{self.chart_name}] touch ({touch.x:.1f}, {touch.y:.1f}) → "
            f"{len(self.info_view.touch_overlay_info)} point(s)"
        )
        return TouchResult(points=list(self.info_view.touch_overlay_info), location=location)

    def touch_ended(self) -> None:
        self.info_view.reset()

    # ── Render ───────────────────────────────────────────────────

    def render(self, chart_size: Rect) -> ChartResult:
        """Compute everything needed to draw the chart at *chart_size*."""
        if not self.has_data():
            return self._empty()

        data = {
            "metadata": self.metadata.to_dict(),
            "size": chart_size.to_dict(),
            "legends": [legend.to_dict() for legend in self.legends],
            "style": style_to_dict(self.chart_style),
        }
        data.update(self._render_data(chart_size))
        return self._result(data)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "chart_name": self.chart_name,
            "chart_type": self.base_chart_type.value,
            "data_set_type": self.data_set_type.value,
            "metadata": self.metadata.to_dict(),
            "data_sets": self.data_sets.to_dict(),
            "legends": [legend.to_dict() for legend in self.legends],
        }

    # ── Result builders ──────────────────────────────────────────

    def _result(self, data: Any, **meta: Any) -> ChartResult:
        return ChartResult(
            chart_id=str(self.id),
            chart_name=self.metadata.title or self.chart_name,
            chart_type=self.base_chart_type.value,
            data=data,
            metadata={"chart_class": self.chart_name, **meta},
        )

    def _empty(self) -> ChartResult:
        """Build a standard empty-data result."""
        return ChartResult(
            chart_id=str(self.id),
            chart_name=self.metadata.title or self.chart_name,
            chart_type=self.base_chart_type.value,
            data=None,
            metadata={"empty": True, "message": self.no_data_text},
        )


class BaseLineChartData(BaseChartData):
    """
    Shared behaviour of line and ranged-line charts.

    The data set supplies its own extent (``min_value()`` /
    ``max_value()``); this class applies the style's baseline and
    topline and maps values to pixels.
    """

    base_chart_type = ChartType.LINE

    def __init__(
        self,
        data_sets: Any,
        metadata: Optional[ChartMetadata] = None,
        x_axis_labels: Optional[List[str]] = None,
        y_axis_labels: Optional[List[str]] = None,
        chart_style: Optional[LineChartStyle] = None,
        no_data_text: Optional[str] = None,
    ) -> None:
        super().__init__(
            data_sets=data_sets,
            metadata=metadata,
            chart_style=chart_style or LineChartStyle(),
            no_data_text=no_data_text,
        )
        self.x_axis_labels = x_axis_labels
        self.y_axis_labels = y_axis_labels
        self.setup_legends()

    # ── Derived values ───────────────────────────────────────────

    def _value_range(self) -> Tuple[float, float, float]:
        return geometry.value_range(
            self.data_sets.min_value(),
            self.data_sets.max_value(),
            self.chart_style.baseline,
            self.chart_style.top_line,
        )

    @property
    def min_value(self) -> float:
        return self._value_range()[0]

    @property
    def max_value(self) -> float:
        return self._value_range()[1]

    @property
    def range(self) -> float:
        return self._value_range()[2]

    @property
    def average(self) -> float:
        return self.data_sets.average()

    def is_greater_than_two(self) -> bool:
        return len(self.data_sets.data_points) >= 2

    def has_data(self) -> bool:
        return self.is_greater_than_two()

    # ── Touch ────────────────────────────────────────────────────

    def get_point_location(
        self,
        touch: Point,
        chart_size: Rect,
        data_set: Any = None,
    ) -> Optional[Point]:
        data_set = data_set or self.data_sets
        return geometry.locate_point(
            data_set.values,
            touch,
            chart_size,
            self.min_value,
            self.range,
            ignore_zero=data_set.style.ignore_zero,
        )

    def get_data_point(self, touch: Point, chart_size: Rect) -> None:
        data_set = self.data_sets
        points = []
        index = geometry.touched_index(touch.x, chart_size.width, len(data_set.data_points))
        if index is not None:
            point = data_set.data_points[index]
            if not (data_set.style.ignore_zero and point.value == 0):
                points.append(replace(point, legend_tag=data_set.legend_title))
        self.info_view.touch_overlay_info = points

    # ── Render ───────────────────────────────────────────────────

    def _render_data(self, chart_size: Rect) -> Dict[str, Any]:
        min_value, max_value, data_range = self._value_range()
        style = self.chart_style
        return {
            "data_set": self.data_sets.to_dict(),
            "range": {
                "min": min_value,
                "max": max_value,
                "range": data_range,
                "average": self.average,
            },
            "points": [
                p.to_dict()
                for p in geometry.line_points(self.data_sets.values, chart_size, min_value, data_range)
            ],
            "x_axis": {
                **labels.x_axis_labels(self),
                "position": style.x_axis_label_position.value,
                "title": style.x_axis_title,
            },
            "y_axis": {
                "labels": labels.y_axis_labels(self),
                "position": style.y_axis_label_position.value,
                "title": style.y_axis_title,
            },
            "grid": {
                "vertical": geometry.vertical_grid_positions(
                    chart_size.width, style.x_axis_grid_style.number_of_lines,
                ),
                "horizontal": geometry.horizontal_grid_positions(
                    chart_size.height, style.y_axis_grid_style.number_of_lines,
                ),
            },
        }
