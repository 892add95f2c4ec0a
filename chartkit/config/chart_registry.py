"""
Chart Registry Configuration.

Maps chart class names to their runtime metadata.  This file is the
ONLY place where you register a new chart type — the rest of the
system discovers it automatically via the Registry Pattern.

Keys:
  class_name → str : must match a class exported from
                     ``chartkit/services/charts/types/<snake_case>.py``.

Values: dict with:
  category       → str : "line" | "pie"
  data_set_type  → str : "line" | "ranged_line" | "pie" — how the
                         ``data_set`` block of a definition is parsed.
  style_type     → str : "line" | "pie" | "doughnut" — which style class
                         the ``style`` block builds.
  default_config → dict: style values applied before the definition's own.

To add a new chart:
  1. Create the chart class in chartkit/services/charts/types/
  2. Add an entry here.
  Done. No other files to touch.
"""

CHART_REGISTRY: dict[str, dict] = {
    # ── Line ─────────────────────────────────────────────────
    "LineChartData": {
        "category": "line",
        "data_set_type": "line",
        "style_type": "line",
        "default_config": {},
    },
    "RangedLineChartData": {
        "category": "line",
        "data_set_type": "ranged_line",
        "style_type": "line",
        "default_config": {},
    },

    # ── Pie ──────────────────────────────────────────────────
    "PieChartData": {
        "category": "pie",
        "data_set_type": "pie",
        "style_type": "pie",
        "default_config": {},
    },
    "DoughnutChartData": {
        "category": "pie",
        "data_set_type": "pie",
        "style_type": "doughnut",
        "default_config": {},
    },
}
