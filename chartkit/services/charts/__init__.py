"""
Chart data classes.

Modules:
  base    : BaseChartData / BaseLineChartData ABCs, ChartResult and TouchResult.
  engine  : ChartEngine — dynamic instantiation via Registry Pattern.
  types/  : Concrete charts (line, ranged line, pie, doughnut).
"""

from chartkit.services.charts.base import BaseChartData, ChartResult, TouchResult
from chartkit.services.charts.engine import ChartEngine, chart_engine

__all__ = ["BaseChartData", "ChartResult", "TouchResult", "ChartEngine", "chart_engine"]
