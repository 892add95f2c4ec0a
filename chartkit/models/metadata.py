"""Chart-level metadata, legends and touch / view state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4

from chartkit.core.config import settings
from chartkit.models.points import Point, Rect
from chartkit.models.styles import ChartType, StrokeStyle


@dataclass
class ChartMetadata:
    """Title and subtitle shown above the chart."""
    title: str = ""
    subtitle: str = ""
    title_font: str = "title3"
    title_colour: str = "#000000"
    subtitle_font: str = "subheadline"
    subtitle_colour: str = "#6b7280"

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "subtitle": self.subtitle}


@dataclass
class LegendData:
    """
    One legend entry.

    ``priority`` orders the entries: the line itself (1) before the
    range fill (2).
    """
    legend: str
    colour: str
    chart_type: ChartType
    priority: int = 1
    stroke_style: Optional[StrokeStyle] = None
    id: UUID = field(default_factory=uuid4)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "legend": self.legend,
            "colour": self.colour,
            "chart_type": self.chart_type.value,
            "priority": self.priority,
        }


@dataclass
class InfoViewData:
    """Touch state: what is under the pointer right now."""
    touch_overlay_info: List[Any] = field(default_factory=list)
    is_touch_current: bool = False
    touch_location: Optional[Point] = None
    chart_size: Optional[Rect] = None
    touch_specifier: str = field(default_factory=lambda: settings.VALUE_SPECIFIER)
    touch_units: str = ""

    def reset(self) -> None:
        self.touch_overlay_info = []
        self.is_touch_current = False
        self.touch_location = None


@dataclass
class ChartViewData:
    """Layout hints gathered while the axes are laid out."""
    has_x_axis_label: bool = False
    x_axis_label_heights: List[float] = field(default_factory=list)
    has_y_axis_label: bool = False
    y_axis_label_width: List[float] = field(default_factory=list)
