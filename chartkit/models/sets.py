"""
Data sets — an ordered list of data points plus the set-level style.

Min / max / average live here; baseline and topline adjustments are
applied by the chart (see ``services.geometry.value_range``).

Each set can be built straight from pandas::

    LineDataSet.from_series(df.set_index("ts")["temp"], legend_title="Temp")
    PieDataSet.from_counts(df, category="product_name", colour="product_color")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pandas as pd

from chartkit.models.points import (
    LineChartDataPoint,
    PieChartDataPoint,
    RangedLineChartDataPoint,
)
from chartkit.models.styles import DotStyle, LineStyle, RangedLineStyle
from chartkit.services.helpers import (
    format_time_labels,
    infer_interval,
    palette_colour,
)


@dataclass
class LineDataSet:
    data_points: List[LineChartDataPoint]
    legend_title: str = ""
    point_style: DotStyle = field(default_factory=DotStyle)
    style: LineStyle = field(default_factory=LineStyle)

    @property
    def values(self) -> List[float]:
        return [p.value for p in self.data_points]

    def min_value(self) -> float:
        """Lowest value; zeros are skipped when the style ignores them."""
        values = self.values
        if self.style.ignore_zero:
            values = [v for v in values if v != 0]
        return min(values, default=0.0)

    def max_value(self) -> float:
        return max(self.values, default=0.0)

    def average(self) -> float:
        if not self.data_points:
            return 0.0
        return sum(self.values) / len(self.data_points)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "legend_title": self.legend_title,
            "data_points": [p.to_dict() for p in self.data_points],
        }

    @classmethod
    def from_series(
        cls,
        series: pd.Series,
        legend_title: Optional[str] = None,
        interval: Optional[str] = None,
        **kwargs: Any,
    ) -> "LineDataSet":
        """
        Build a set from a Series; the index becomes the x axis labels.

        NaN values are dropped. A DatetimeIndex is formatted with the
        label format for *interval* (inferred from the spacing if omitted).
        """
        series = series.dropna()
        labels = _index_labels(series.index, interval)
        points = [
            LineChartDataPoint(
                value=float(v),
                x_axis_label=label,
                description=label,
                date=ts.to_pydatetime() if isinstance(ts, pd.Timestamp) else None,
            )
            for v, label, ts in zip(series.values, labels, series.index)
        ]
        title = legend_title if legend_title is not None else str(series.name or "")
        return cls(data_points=points, legend_title=title, **kwargs)


@dataclass
class RangedLineDataSet:
    data_points: List[RangedLineChartDataPoint]
    legend_title: str = ""
    legend_fill_title: str = ""
    point_style: DotStyle = field(default_factory=DotStyle)
    style: RangedLineStyle = field(default_factory=RangedLineStyle)

    @property
    def values(self) -> List[float]:
        return [p.value for p in self.data_points]

    def min_value(self) -> float:
        """Lowest lower bound."""
        lows = [p.lower_value for p in self.data_points]
        if self.style.ignore_zero:
            lows = [p.lower_value for p in self.data_points if p.value != 0]
        return min(lows, default=0.0)

    def max_value(self) -> float:
        """Highest upper bound."""
        return max((p.upper_value for p in self.data_points), default=0.0)

    def average(self) -> float:
        if not self.data_points:
            return 0.0
        return sum(self.values) / len(self.data_points)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "legend_title": self.legend_title,
            "legend_fill_title": self.legend_fill_title,
            "data_points": [p.to_dict() for p in self.data_points],
        }

    @classmethod
    def from_frame(
        cls,
        df: pd.DataFrame,
        value: str,
        upper: str,
        lower: str,
        label: Optional[str] = None,
        **kwargs: Any,
    ) -> "RangedLineDataSet":
        """Build a set from three numeric columns and an optional label column."""
        missing = [c for c in (value, upper, lower, label) if c and c not in df.columns]
        if missing:
            raise ValueError(f"Columns not found in DataFrame: {missing}")

        frame = df.dropna(subset=[value, upper, lower])
        points: List[RangedLineChartDataPoint] = []
        for _, row in frame.iterrows():
            text = str(row[label]) if label else None
            points.append(RangedLineChartDataPoint(
                value=float(row[value]),
                upper_value=float(row[upper]),
                lower_value=float(row[lower]),
                x_axis_label=text,
                description=text,
            ))
        return cls(data_points=points, **kwargs)


@dataclass
class PieDataSet:
    data_points: List[PieChartDataPoint]
    legend_title: str = ""

    @property
    def values(self) -> List[float]:
        return [p.value for p in self.data_points]

    def total(self) -> float:
        return sum(self.values)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "legend_title": self.legend_title,
            "data_points": [p.to_dict() for p in self.data_points],
        }

    @classmethod
    def from_frame(
        cls,
        df: pd.DataFrame,
        value: str,
        description: str,
        colour: Optional[str] = None,
        legend_title: str = "",
    ) -> "PieDataSet":
        """One slice per row."""
        points = [
            PieChartDataPoint(
                value=float(row[value]),
                description=str(row[description]),
                colour=palette_colour(idx, row[colour] if colour else None),
            )
            for idx, (_, row) in enumerate(df.iterrows())
        ]
        return cls(data_points=points, legend_title=legend_title)

    @classmethod
    def from_counts(
        cls,
        df: pd.DataFrame,
        category: str,
        colour: Optional[str] = None,
        legend_title: str = "",
    ) -> "PieDataSet":
        """One slice per distinct *category*, sized by row count."""
        if df.empty or category not in df.columns:
            return cls(data_points=[], legend_title=legend_title)

        keys = [category, colour] if colour else [category]
        grouped = df.groupby(keys).size().reset_index(name="count")
        return cls.from_frame(
            grouped,
            value="count",
            description=category,
            colour=colour,
            legend_title=legend_title,
        )


def _index_labels(index: pd.Index, interval: Optional[str]) -> List[str]:
    if isinstance(index, pd.DatetimeIndex):
        return format_time_labels(index, interval or infer_interval(index))
    return [str(v) for v in index]
