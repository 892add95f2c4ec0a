"""
Data points and plane geometry values.

  - ``Point`` / ``Rect``: pixel-space coordinates and drawing areas.
  - ``LineChartDataPoint``: one observation on a line chart.
  - ``RangedLineChartDataPoint``: a line observation with upper/lower bounds.
  - ``PieChartDataPoint``: one slice of a pie or doughnut chart.

Origin is top-left, y grows downwards (screen convention).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID, uuid4


# ─────────────────────────────────────────────────────────────
#  GEOMETRY
# ─────────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True, slots=True)
class Rect:
    """Rectangular drawing area."""
    width: float
    height: float
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Rect size must be non-negative, got {self.width}x{self.height}"
            )

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


# ─────────────────────────────────────────────────────────────
#  LINE DATA POINTS
# ─────────────────────────────────────────────────────────────

class _LinePointLabels:
    """Label accessors and serialization shared by line data points."""

    @property
    def wrapped_x_axis_label(self) -> str:
        if self.x_axis_label is not None:
            return self.x_axis_label
        return self.description or ""

    @property
    def wrapped_description(self) -> str:
        return self.description or ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "value": self.value,
            "x_axis_label": self.wrapped_x_axis_label,
            "description": self.wrapped_description,
            "date": self.date.isoformat() if self.date else None,
            "pointer_colour": self.pointer_colour,
            "legend_tag": self.legend_tag,
        }


@dataclass
class LineChartDataPoint(_LinePointLabels):
    """
    Single observation on a line chart.

    ``legend_tag`` is filled in on the copy a touch interaction returns.
    """
    value: float
    x_axis_label: Optional[str] = None
    description: Optional[str] = None
    date: Optional[datetime] = None
    pointer_colour: Optional[str] = None
    legend_tag: str = ""
    id: UUID = field(default_factory=uuid4)


@dataclass
class RangedLineChartDataPoint(_LinePointLabels):
    """Line observation that also carries an upper and lower bound."""
    value: float
    upper_value: float
    lower_value: float
    x_axis_label: Optional[str] = None
    description: Optional[str] = None
    date: Optional[datetime] = None
    pointer_colour: Optional[str] = None
    legend_tag: str = ""
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        if self.upper_value < self.lower_value:
            raise ValueError(
                f"upper_value ({self.upper_value}) is below "
                f"lower_value ({self.lower_value})"
            )

    def to_dict(self) -> Dict[str, Any]:
        out = super().to_dict()
        out["upper_value"] = self.upper_value
        out["lower_value"] = self.lower_value
        return out


# ─────────────────────────────────────────────────────────────
#  PIE DATA POINTS
# ─────────────────────────────────────────────────────────────

@dataclass
class PieChartDataPoint:
    """
    One slice of a pie / doughnut chart.

    ``start_angle`` and ``amount`` are in radians and are assigned by
    the owning chart (see ``PieChartData.make_data_points``).
    """
    value: float
    description: Optional[str] = None
    colour: str = "#3b82f6"
    label: Optional[str] = None
    legend_tag: str = ""
    start_angle: float = 0.0
    amount: float = 0.0
    id: UUID = field(default_factory=uuid4)

    @property
    def wrapped_description(self) -> str:
        return self.description or ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "value": self.value,
            "description": self.wrapped_description,
            "colour": self.colour,
            "label": self.label,
            "legend_tag": self.legend_tag,
            "start_angle": self.start_angle,
            "amount": self.amount,
        }
