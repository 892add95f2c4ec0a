"""
Shared helpers for chart data sets and chart data classes.

Single Responsibility: reusable utility functions consumed by
multiple chart types.  No chart-specific logic here.
"""

from __future__ import annotations

from typing import List, Optional

import pandas as pd


# ── Time formatting ──────────────────────────────────────────────

TIME_LABEL_FORMATS = {
    "minute": "%H:%M",
    "15min": "%d/%m %H:%M",
    "hour": "%d/%m %H:%M",
    "day": "%d/%m/%Y",
    "week": "Wk %d/%m",
    "month": "%b %Y",
}


def format_time_labels(index, interval: str) -> List[str]:
    """Format a pandas DatetimeIndex to human-readable labels."""
    fmt = TIME_LABEL_FORMATS.get(interval, "%d/%m %H:%M")
    return [idx.strftime(fmt) for idx in index]


def infer_interval(index: pd.DatetimeIndex) -> str:
    """
    Guess the label interval from the spacing of a DatetimeIndex.

    Falls back to ``"hour"`` when the index is too short to tell.
    """
    if len(index) < 2:
        return "hour"
    step = (index[1:] - index[:-1]).min()
    if step < pd.Timedelta(minutes=15):
        return "minute"
    if step < pd.Timedelta(hours=1):
        return "15min"
    if step < pd.Timedelta(days=1):
        return "hour"
    if step < pd.Timedelta(days=7):
        return "day"
    if step < pd.Timedelta(days=28):
        return "week"
    return "month"


# ── Number formatting ────────────────────────────────────────────

def format_value(value: float, specifier: str = "%.0f", units: str = "") -> str:
    """Printf-style formatting with optional trailing units."""
    text = specifier % value
    return f"{text} {units}" if units else text


# ── Colour palettes ─────────────────────────────────────────────

FALLBACK_PALETTE = [
    "#3b82f6", "#22c55e", "#ef4444", "#f59e0b",
    "#8b5cf6", "#ec4899", "#14b8a6", "#f97316",
]


def palette_colour(idx: int, colour: Optional[str] = None) -> str:
    """Return *colour* if set, otherwise cycle through the fallback palette."""
    if colour:
        return colour
    return FALLBACK_PALETTE[idx % len(FALLBACK_PALETTE)]


def alpha(hex_color: str, a: float = 0.15) -> str:
    """Convert '#RRGGBB' → 'rgba(r,g,b,a)'."""
    h = hex_color.lstrip("#")
    if len(h) != 6:
        return f"rgba(100,100,100,{a})"
    r, g, b = int(h[:2], 16), int(h[2:4], 16), int(h[4:6], 16)
    return f"rgba({r},{g},{b},{a})"
