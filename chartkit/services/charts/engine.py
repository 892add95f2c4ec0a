"""
ChartEngine — Dynamic chart construction via Registry Pattern.

Single Responsibility: given a chart class name and a plain-dict
definition, instantiate the correct concrete chart data class and
execute ``render()`` or ``touch_interaction()``.

Uses ``CHART_REGISTRY`` for metadata and Python's module system for
class resolution.  No hardcoded if/else chains per chart class.

Usage::

    from chartkit.services.charts.engine import chart_engine

    result = chart_engine.render(
        "LineChartData",
        {"data_set": {"data_points": [{"value": 1}, {"value": 3}]}},
        Rect(width=300, height=200),
    )
"""

from __future__ import annotations

import importlib
import logging
from typing import Any, Callable, Dict, List, Optional, Type

from chartkit.config.chart_registry import CHART_REGISTRY
from chartkit.models.metadata import ChartMetadata
from chartkit.models.points import (
    LineChartDataPoint,
    PieChartDataPoint,
    Point,
    RangedLineChartDataPoint,
    Rect,
)
from chartkit.models.sets import LineDataSet, PieDataSet, RangedLineDataSet
from chartkit.models.styles import (
    Animation,
    Baseline,
    BaselineKind,
    DotStyle,
    DoughnutChartStyle,
    GridStyle,
    LabelsFrom,
    LabelsFromKind,
    LineChartStyle,
    LineMarkerType,
    LineStyle,
    LineType,
    PieChartStyle,
    RangedLineStyle,
    StrokeStyle,
    Topline,
    ToplineKind,
    XAxisLabelPosition,
    YAxisLabelPosition,
    YAxisLabelType,
)
from chartkit.services.charts.base import BaseChartData

logger = logging.getLogger(__name__)

# Module path where concrete charts live
_CHART_MODULE = "chartkit.services.charts.types"

_STYLE_CLASSES = {
    "line": LineChartStyle,
    "pie": PieChartStyle,
    "doughnut": DoughnutChartStyle,
}

# Style keys that need converting from their JSON form
_STYLE_CONVERTERS: Dict[str, Callable[[Any], Any]] = {
    "marker_type": LineMarkerType,
    "marker_dot": lambda v: _make(DotStyle, v),
    "x_axis_grid_style": lambda v: _make(GridStyle, v),
    "y_axis_grid_style": lambda v: _make(GridStyle, v),
    "x_axis_label_position": XAxisLabelPosition,
    "y_axis_label_position": YAxisLabelPosition,
    "y_axis_label_type": YAxisLabelType,
    "x_axis_labels_from": lambda v: _setting(LabelsFrom, LabelsFromKind, v, "data_point", "rotation"),
    "baseline": lambda v: _setting(Baseline, BaselineKind, v, "minimum_value", "value"),
    "top_line": lambda v: _setting(Topline, ToplineKind, v, "maximum_value", "value"),
    "global_animation": lambda v: _make(Animation, v),
}


def _make(cls: type, raw: Dict[str, Any]) -> Any:
    """Instantiate a dataclass from a dict, reporting bad keys as ValueError."""
    try:
        return cls(**raw)
    except TypeError as exc:
        raise ValueError(f"Invalid {cls.__name__}: {exc}") from exc


def _number(value: Any, name: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a number, got {value!r}") from exc


def _setting(cls: type, kind_cls: type, raw: Any, default_kind: str, number_key: str) -> Any:
    """
    Build a ``Baseline`` / ``Topline`` / ``LabelsFrom`` from its JSON form.

    Accepts ``{"kind": ..., <number_key>: ...}`` or a bare kind name.
    """
    if isinstance(raw, str):
        raw = {"kind": raw}
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid {cls.__name__}: expected an object or a kind name, got {raw!r}")

    kwargs = dict(raw)
    kwargs["kind"] = kind_cls(kwargs.get("kind", default_kind))
    if kwargs.get(number_key) is None:
        kwargs.pop(number_key, None)
    else:
        kwargs[number_key] = _number(kwargs[number_key], f"{cls.__name__}.{number_key}")
    return _make(cls, kwargs)


class ChartEngine:
    """
    Dynamic chart resolver and executor.

    Pipeline per chart:
      1. Look up metadata in CHART_REGISTRY.
      2. Import the concrete class from ``services/charts/types/``.
      3. Build data set, style and metadata from the definition.
      4. Call ``render()`` / ``touch_interaction()``.
    """

    def __init__(self) -> None:
        # Cache: class_name → class object (avoids repeated imports)
        self._class_cache: Dict[str, Type[BaseChartData]] = {}

    # ── Public API ───────────────────────────────────────────────

    @staticmethod
    def is_registered(class_name: str) -> bool:
        return class_name in CHART_REGISTRY

    @staticmethod
    def registered_charts() -> List[str]:
        return sorted(CHART_REGISTRY)

    def build(self, class_name: str, definition: Dict[str, Any]) -> BaseChartData:
        """
        Instantiate *class_name* from a definition dict.

        Raises:
            ValueError: unknown chart, or a definition that does not
                describe a valid chart.
        """
        entry = CHART_REGISTRY.get(class_name)
        if not entry:
            raise ValueError(f"Chart '{class_name}' not in CHART_REGISTRY")

        chart_cls = self._resolve_class(class_name)
        if chart_cls is None:
            raise ValueError(f"Class '{class_name}' not found in {_CHART_MODULE}")

        data_set = self._build_data_set(entry["data_set_type"], definition.get("data_set") or {})
        style_raw = {**entry.get("default_config", {}), **(definition.get("style") or {})}
        style = self._build_style(entry["style_type"], style_raw)
        metadata = _make(ChartMetadata, definition.get("metadata") or {})

        kwargs: Dict[str, Any] = {
            "data_sets": data_set,
            "metadata": metadata,
            "chart_style": style,
            "no_data_text": definition.get("no_data_text"),
        }
        if entry["category"] == "line":
            kwargs["x_axis_labels"] = definition.get("x_axis_labels")
            kwargs["y_axis_labels"] = definition.get("y_axis_labels")

        return chart_cls(**kwargs)

    def render(
        self,
        class_name: str,
        definition: Dict[str, Any],
        chart_size: Rect,
    ) -> Dict[str, Any]:
        """Build and render one chart; failures become an error result."""
        try:
            chart = self.build(class_name, definition)
            return chart.render(chart_size).to_dict()
        except Exception as exc:
            logger.error(
                f"[ChartEngine] Error rendering '{class_name}': {exc}",
                exc_info=True,
            )
            return self._error_result(class_name, str(exc))

    def render_many(
        self,
        charts: List[Dict[str, Any]],
        chart_size: Rect,
    ) -> List[Dict[str, Any]]:
        """
        Render a batch of ``{"chart": <class name>, **definition}`` dicts
        at the same size.
        """
        results: List[Dict[str, Any]] = []
        for item in charts:
            class_name = item.get("chart", "")
            results.append(self.render(class_name, item, chart_size))
        return results

    def touch(
        self,
        class_name: str,
        definition: Dict[str, Any],
        chart_size: Rect,
        touch: Point,
    ) -> Dict[str, Any]:
        """Build a chart and report what lies under *touch*."""
        chart = self.build(class_name, definition)
        result = chart.touch_interaction(touch, chart_size)
        return {"chart_name": class_name, **result.to_dict()}

    # ── Class resolution ─────────────────────────────────────────

    def _resolve_class(self, class_name: str) -> Optional[Type[BaseChartData]]:
        """
        Import and cache the chart class by its name.

        Converts CamelCase class name to snake_case module name:
          ``RangedLineChartData`` → ``ranged_line_chart_data``
        """
        if class_name in self._class_cache:
            return self._class_cache[class_name]

        module_name = self._class_to_module(class_name)
        full_path = f"{_CHART_MODULE}.{module_name}"

        try:
            module = importlib.import_module(full_path)
            cls = getattr(module, class_name, None)
            if cls and issubclass(cls, BaseChartData):
                self._class_cache[class_name] = cls
                return cls
            logger.error(
                f"[ChartEngine] {full_path} does not export '{class_name}' "
                f"as a BaseChartData subclass"
            )
        except ImportError as exc:
            logger.error(f"[ChartEngine] Cannot import {full_path}: {exc}")

        return None

    @staticmethod
    def _class_to_module(class_name: str) -> str:
        """
        Convert CamelCase to snake_case for module resolution.

        ``LineChartData``      → ``line_chart_data``
        ``DoughnutChartData``  → ``doughnut_chart_data``
        """
        result: List[str] = []
        for i, ch in enumerate(class_name):
            if ch.isupper() and i > 0:
                result.append("_")
            result.append(ch.lower())
        return "".join(result)

    # ── Definition parsing ───────────────────────────────────────

    @staticmethod
    def _build_line_style(raw: Dict[str, Any], ranged: bool) -> LineStyle:
        kwargs = dict(raw)
        if "line_type" in kwargs:
            kwargs["line_type"] = LineType(kwargs["line_type"])
        if "stroke_style" in kwargs:
            kwargs["stroke_style"] = _make(StrokeStyle, kwargs["stroke_style"])
        style_cls = RangedLineStyle if ranged else LineStyle
        try:
            return style_cls(**kwargs)
        except TypeError as exc:
            raise ValueError(f"Invalid data set style: {exc}") from exc

    def _build_data_set(self, data_set_type: str, raw: Dict[str, Any]) -> Any:
        raw_points = raw.get("data_points") or []
        legend_title = raw.get("legend_title", "")

        if data_set_type == "pie":
            points = [_make(PieChartDataPoint, p) for p in raw_points]
            return PieDataSet(data_points=points, legend_title=legend_title)

        ranged = data_set_type == "ranged_line"
        style = self._build_line_style(raw.get("style") or {}, ranged)
        point_style = _make(DotStyle, raw.get("point_style") or {})

        if ranged:
            return RangedLineDataSet(
                data_points=[_make(RangedLineChartDataPoint, p) for p in raw_points],
                legend_title=legend_title,
                legend_fill_title=raw.get("legend_fill_title", ""),
                point_style=point_style,
                style=style,
            )
        return LineDataSet(
            data_points=[_make(LineChartDataPoint, p) for p in raw_points],
            legend_title=legend_title,
            point_style=point_style,
            style=style,
        )

    @staticmethod
    def _build_style(style_type: str, raw: Dict[str, Any]) -> Any:
        style_cls = _STYLE_CLASSES[style_type]
        kwargs: Dict[str, Any] = {}
        for key, value in raw.items():
            converter = _STYLE_CONVERTERS.get(key)
            kwargs[key] = converter(value) if converter and value is not None else value
        try:
            return style_cls(**kwargs)
        except TypeError as exc:
            raise ValueError(f"Invalid {style_type} chart style: {exc}") from exc

    @staticmethod
    def _error_result(class_name: str, error: str) -> Dict[str, Any]:
        """Build an error result dict for a failed chart."""
        return {
            "chart_id": "",
            "chart_name": class_name,
            "chart_type": "error",
            "data": None,
            "metadata": {"error": True, "message": error},
        }


# ── Singleton ────────────────────────────────────────────────────
chart_engine = ChartEngine()
