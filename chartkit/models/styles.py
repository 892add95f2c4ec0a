"""
Styling value objects for line, pie and doughnut charts.

Colours are CSS colour strings (``#RRGGBB`` or ``rgba(...)``), fonts are
semantic font names (``caption``, ``title3``...). Nothing here draws;
the renderer on the other side decides what a font name means.

Defaults that are environment-dependent (number of labels, grid lines,
animation duration, doughnut width) come from ``Settings``.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from chartkit.core.config import settings
from chartkit.services.helpers import alpha


# ─────────────────────────────────────────────────────────────
#  ENUMS
# ─────────────────────────────────────────────────────────────

class ChartType(str, Enum):
    LINE = "line"
    BAR = "bar"
    PIE = "pie"


class DataSetType(str, Enum):
    SINGLE = "single"
    MULTI = "multi"


class LineType(str, Enum):
    CURVED_LINE = "curved_line"
    LINE = "line"


class BaselineKind(str, Enum):
    MINIMUM_VALUE = "minimum_value"
    MINIMUM_WITH_MAXIMUM = "minimum_with_maximum"
    ZERO = "zero"


class ToplineKind(str, Enum):
    MAXIMUM_VALUE = "maximum_value"
    MAXIMUM_OF = "maximum_of"


class XAxisLabelPosition(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"


class YAxisLabelPosition(str, Enum):
    LEADING = "leading"
    TRAILING = "trailing"


class YAxisLabelType(str, Enum):
    NUMERIC = "numeric"
    CUSTOM = "custom"


class LabelsFromKind(str, Enum):
    DATA_POINT = "data_point"
    CHART_DATA = "chart_data"


class LineMarkerType(str, Enum):
    NONE = "none"
    INDICATOR = "indicator"
    VERTICAL = "vertical"
    FULL = "full"
    BOTTOM_LEADING = "bottom_leading"
    BOTTOM_TRAILING = "bottom_trailing"
    TOP_LEADING = "top_leading"
    TOP_TRAILING = "top_trailing"


class InfoBoxPlacement(str, Enum):
    FLOATING = "floating"
    INFO_BOX = "info_box"
    HEADER = "header"


class InfoBoxAlignment(str, Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


# ─────────────────────────────────────────────────────────────
#  SMALL VALUE OBJECTS
# ─────────────────────────────────────────────────────────────

@dataclass
class Animation:
    """Animation settings handed to the renderer untouched."""
    curve: str = "linear"
    duration: float = field(default_factory=lambda: settings.ANIMATION_DURATION)


@dataclass
class StrokeStyle:
    line_width: float = 1.0
    line_cap: str = "butt"
    line_join: str = "miter"
    dash: List[float] = field(default_factory=list)
    dash_phase: float = 0.0


@dataclass
class GridStyle:
    """Style of the lines breaking up the chart area."""
    number_of_lines: int = field(default_factory=lambda: settings.GRID_NUMBER_OF_LINES)
    line_colour: str = "rgba(128,128,128,0.25)"
    line_width: float = 1.0
    dash: List[float] = field(default_factory=list)
    dash_phase: float = 0.0


@dataclass
class DotStyle:
    size: float = 15.0
    fill_colour: str = "#ffffff"
    line_colour: str = "#3b82f6"
    line_width: float = 2.0


@dataclass(frozen=True)
class Baseline:
    """
    Where the chart is drawn from.

    ``Baseline.minimum_with_maximum(of=5)`` draws from the data minimum
    unless that is above ``of``.
    """
    kind: BaselineKind = BaselineKind.MINIMUM_VALUE
    value: Optional[float] = None

    @classmethod
    def minimum_value(cls) -> "Baseline":
        return cls(BaselineKind.MINIMUM_VALUE)

    @classmethod
    def minimum_with_maximum(cls, of: float) -> "Baseline":
        return cls(BaselineKind.MINIMUM_WITH_MAXIMUM, of)

    @classmethod
    def zero(cls) -> "Baseline":
        return cls(BaselineKind.ZERO)


@dataclass(frozen=True)
class Topline:
    """Where the chart's vertical extent ends."""
    kind: ToplineKind = ToplineKind.MAXIMUM_VALUE
    value: Optional[float] = None

    @classmethod
    def maximum_value(cls) -> "Topline":
        return cls(ToplineKind.MAXIMUM_VALUE)

    @classmethod
    def maximum_of(cls, of: float) -> "Topline":
        return cls(ToplineKind.MAXIMUM_OF, of)


@dataclass(frozen=True)
class LabelsFrom:
    """Source of the x axis labels, with label rotation in degrees."""
    kind: LabelsFromKind = LabelsFromKind.DATA_POINT
    rotation: float = 0.0

    @classmethod
    def data_point(cls, rotation: float = 0.0) -> "LabelsFrom":
        return cls(LabelsFromKind.DATA_POINT, rotation)

    @classmethod
    def chart_data(cls) -> "LabelsFrom":
        return cls(LabelsFromKind.CHART_DATA)


# ─────────────────────────────────────────────────────────────
#  DATA SET STYLES
# ─────────────────────────────────────────────────────────────

@dataclass
class LineStyle:
    line_colour: str = "#3b82f6"
    line_type: LineType = LineType.CURVED_LINE
    stroke_style: StrokeStyle = field(default_factory=StrokeStyle)
    ignore_zero: bool = False


@dataclass
class RangedLineStyle(LineStyle):
    """Line style plus the colour of the band between the bounds."""
    fill_colour: Optional[str] = None

    def __post_init__(self) -> None:
        if self.fill_colour is None:
            self.fill_colour = alpha(self.line_colour)


# ─────────────────────────────────────────────────────────────
#  DEPRECATED INFO BOX FIELDS
# ─────────────────────────────────────────────────────────────

_INFO_BOX_MESSAGE = 'Please use "touch_display" instead.'


class _DeprecatedField:
    """Readable / writable attribute that warns on every access."""

    def __init__(self, default: Any = None, default_factory: Optional[Callable[[], Any]] = None) -> None:
        self.default = default
        self.default_factory = default_factory

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.private = f"_{name}"

    def __get__(self, obj: Any, objtype: Optional[type] = None) -> Any:
        if obj is None:
            return self
        warnings.warn(f"{self.name}: {_INFO_BOX_MESSAGE}", DeprecationWarning, stacklevel=2)
        if self.private not in obj.__dict__:
            if self.default_factory is None:
                return self.default
            # mutable defaults are built once per style instance
            obj.__dict__[self.private] = self.default_factory()
        return obj.__dict__[self.private]

    def __set__(self, obj: Any, value: Any) -> None:
        warnings.warn(f"{self.name}: {_INFO_BOX_MESSAGE}", DeprecationWarning, stacklevel=2)
        obj.__dict__[self.private] = value


class _InfoBoxStyle:
    """Info box settings superseded by touch display."""
    info_box_placement = _DeprecatedField(InfoBoxPlacement.FLOATING)
    info_box_content_alignment = _DeprecatedField(InfoBoxAlignment.VERTICAL)
    info_box_value_font = _DeprecatedField("title3")
    info_box_value_colour = _DeprecatedField("#000000")
    info_box_description_font = _DeprecatedField("caption")
    info_box_description_colour = _DeprecatedField("#000000")
    info_box_background_colour = _DeprecatedField("#ffffff")
    info_box_border_colour = _DeprecatedField("transparent")
    info_box_border_style = _DeprecatedField(default_factory=lambda: StrokeStyle(line_width=0))


# ─────────────────────────────────────────────────────────────
#  CHART STYLES
# ─────────────────────────────────────────────────────────────

@dataclass
class LineChartStyle(_InfoBoxStyle):
    """
    Overall aesthetic of a line chart, not including anything specific
    to the data set.

    ``baseline`` / ``top_line`` control the vertical scale: draw from the
    data minimum (default), from zero, or up to a fixed maximum.
    """
    marker_type: LineMarkerType = LineMarkerType.INDICATOR
    marker_dot: DotStyle = field(default_factory=DotStyle)

    x_axis_grid_style: GridStyle = field(default_factory=GridStyle)
    x_axis_label_position: XAxisLabelPosition = XAxisLabelPosition.BOTTOM
    x_axis_label_font: str = "caption"
    x_axis_label_colour: str = "#000000"
    x_axis_labels_from: LabelsFrom = field(default_factory=LabelsFrom.data_point)
    x_axis_title: Optional[str] = None
    x_axis_title_font: str = "caption"
    x_axis_title_colour: str = "#000000"
    x_axis_border_colour: Optional[str] = None

    y_axis_grid_style: GridStyle = field(default_factory=GridStyle)
    y_axis_label_position: YAxisLabelPosition = YAxisLabelPosition.LEADING
    y_axis_label_font: str = "caption"
    y_axis_label_colour: str = "#000000"
    y_axis_number_of_labels: int = field(
        default_factory=lambda: settings.Y_AXIS_NUMBER_OF_LABELS
    )
    y_axis_label_type: YAxisLabelType = YAxisLabelType.NUMERIC
    y_axis_title: Optional[str] = None
    y_axis_title_font: str = "caption"
    y_axis_title_colour: str = "#000000"
    y_axis_border_colour: Optional[str] = None

    baseline: Baseline = field(default_factory=Baseline.minimum_value)
    top_line: Topline = field(default_factory=Topline.maximum_value)

    global_animation: Animation = field(default_factory=Animation)

    def __post_init__(self) -> None:
        if self.y_axis_number_of_labels < 1:
            raise ValueError("y_axis_number_of_labels must be at least 1")


@dataclass
class PieChartStyle(_InfoBoxStyle):
    global_animation: Animation = field(default_factory=Animation)


@dataclass
class DoughnutChartStyle(_InfoBoxStyle):
    """``stroke_width`` is the thickness of the ring."""
    global_animation: Animation = field(default_factory=Animation)
    stroke_width: float = field(default_factory=lambda: settings.DOUGHNUT_STROKE_WIDTH)

    def __post_init__(self) -> None:
        if self.stroke_width <= 0:
            raise ValueError("stroke_width must be positive")


def style_to_dict(style: Any) -> Dict[str, Any]:
    """Serialize a style dataclass, flattening enums to their values."""
    def convert(value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        if is_dataclass(value):
            return {f.name: convert(getattr(value, f.name)) for f in fields(value)}
        if isinstance(value, list):
            return [convert(v) for v in value]
        return value

    return convert(style)
