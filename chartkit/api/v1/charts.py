"""
Chart endpoints — render a chart definition and hit-test a pointer.

A chart definition names a registered chart class and carries its data
set, style overrides and metadata as plain JSON.  The response is the
geometry the client needs to draw (points, labels, grid, legends) or,
for ``/touch``, the data points under the pointer.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from chartkit.models.points import Point, Rect
from chartkit.services.charts.engine import chart_engine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/charts", tags=["charts"])


# ── Request models ───────────────────────────────────────────────

class SizeModel(BaseModel):
    """Drawing area in pixels."""
    width: float = Field(..., ge=0)
    height: float = Field(..., ge=0)


class PointModel(BaseModel):
    """Pointer location in chart-local pixels."""
    x: float
    y: float


class DataPointModel(BaseModel):
    """
    One data point.  Which fields apply depends on the chart:
    ``upper_value`` / ``lower_value`` for ranged lines,
    ``colour`` / ``label`` for pie and doughnut slices.
    """
    value: float
    x_axis_label: Optional[str] = None
    description: Optional[str] = None
    date: Optional[datetime] = None
    pointer_colour: Optional[str] = None
    upper_value: Optional[float] = None
    lower_value: Optional[float] = None
    colour: Optional[str] = None
    label: Optional[str] = None


class DataSetModel(BaseModel):
    data_points: List[DataPointModel] = []
    legend_title: str = ""
    legend_fill_title: Optional[str] = None
    style: Dict[str, Any] = {}
    point_style: Dict[str, Any] = {}


class ChartRenderRequest(BaseModel):
    """Request body for POST /charts/render."""
    chart: str = Field(
        ...,
        description="Registered chart class name, e.g. 'LineChartData'.",
    )
    data_set: DataSetModel
    size: SizeModel
    metadata: Dict[str, str] = {}
    style: Dict[str, Any] = {}
    x_axis_labels: Optional[List[str]] = None
    y_axis_labels: Optional[List[str]] = None
    no_data_text: Optional[str] = None


class ChartTouchRequest(ChartRenderRequest):
    """Request body for POST /charts/touch."""
    touch: PointModel


class ChartBatchRequest(BaseModel):
    """Request body for POST /charts/render/batch — many charts, one size."""
    charts: List[Dict[str, Any]]
    size: SizeModel


# ── Helpers ──────────────────────────────────────────────────────

def _require_registered(class_name: str) -> None:
    if not chart_engine.is_registered(class_name):
        raise HTTPException(status_code=404, detail=f"Chart '{class_name}' not found")


def _definition(req: ChartRenderRequest) -> Dict[str, Any]:
    """Flatten the request into the plain dict ``ChartEngine`` expects."""
    return req.model_dump(exclude={"size", "touch"}, exclude_none=True)


def _rect(size: SizeModel) -> Rect:
    return Rect(width=size.width, height=size.height)


# ── Endpoints ────────────────────────────────────────────────────

@router.post("/render")
async def render_chart(request: ChartRenderRequest):
    """
    Render one chart.

    Returns the ``ChartResult`` dict; ``data`` is null and
    ``metadata.empty`` is true when there is not enough data to draw.
    """
    _require_registered(request.chart)
    try:
        chart = chart_engine.build(request.chart, _definition(request))
        return chart.render(_rect(request.size)).to_dict()
    except ValueError as exc:
        logger.info(f"[charts] Rejected '{request.chart}' definition: {exc}")
        raise HTTPException(status_code=400, detail=str(exc))


@router.post("/render/batch")
async def render_charts(request: ChartBatchRequest):
    """Render several charts; a failing chart yields an error entry, not a 4xx."""
    return {"charts": chart_engine.render_many(request.charts, _rect(request.size))}


@router.post("/touch")
async def touch_chart(request: ChartTouchRequest):
    """Return the data point(s) under ``touch`` and the marker location."""
    _require_registered(request.chart)
    try:
        return chart_engine.touch(
            request.chart,
            _definition(request),
            _rect(request.size),
            Point(x=request.touch.x, y=request.touch.y),
        )
    except ValueError as exc:
        logger.info(f"[charts] Rejected '{request.chart}' touch: {exc}")
        raise HTTPException(status_code=400, detail=str(exc))
