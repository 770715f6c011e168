"""API response models."""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, Field

from tracesight.engine.context import AnalysisContext
from tracesight.models.trace import Junction, Point, Trace


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    transforms_registered: int = 0


class IssueOut(BaseModel):
    kind: str
    detail: str = ""


class TraceOut(BaseModel):
    id: str
    width: float | None = None
    stroke: str | None = None
    fill: str | None = None
    layer: str | None = None
    transform: str | None = None
    points: list[tuple[float | None, float | None]] = Field(default_factory=list)
    start_point: tuple[float | None, float | None] | None = None
    end_point: tuple[float | None, float | None] | None = None
    direction: str = "unknown"
    connected_traces: list[str] = Field(default_factory=list)
    net_id: int | None = None
    valid: bool = True
    issues: list[IssueOut] = Field(default_factory=list)
    features: dict[str, Any] = Field(default_factory=dict)


class JunctionOut(BaseModel):
    point: tuple[float, float]
    trace_ids: list[str] = Field(default_factory=list)


class AnalyzeResponse(BaseModel):
    trace_count: int = 0
    junction_count: int = 0
    traces: list[TraceOut] = Field(default_factory=list)
    junctions: list[JunctionOut] = Field(default_factory=list)
    nets: dict[int, list[str]] = Field(default_factory=dict)
    tolerance: float = 0.1
    processing_time_ms: float = 0.0
    transforms_completed: int = 0
    transforms_failed: int = 0
    errors: dict[str, str] = Field(default_factory=dict)


class NormalizeResponse(BaseModel):
    svg: str
    traces_rewritten: list[str] = Field(default_factory=list)


def _finite(value: float) -> float | None:
    # NaN/inf aren't valid JSON
    return value if math.isfinite(value) else None


def _point(p: Point | None) -> tuple[float | None, float | None] | None:
    if p is None:
        return None
    return (_finite(p.x), _finite(p.y))


def trace_to_output(trace: Trace) -> TraceOut:
    return TraceOut(
        id=trace.id,
        width=_finite(trace.width),
        stroke=trace.stroke,
        fill=trace.fill,
        layer=trace.layer,
        transform=trace.transform,
        points=[_point(p) for p in trace.points],
        start_point=_point(trace.start_point),
        end_point=_point(trace.end_point),
        direction=trace.direction.value,
        connected_traces=sorted(trace.connected_traces),
        net_id=trace.net_id,
        valid=trace.is_valid,
        issues=[IssueOut(kind=i.kind.value, detail=i.detail) for i in trace.issues],
        features=trace.features,
    )


def junction_to_output(junction: Junction) -> JunctionOut:
    return JunctionOut(point=(junction.point.x, junction.point.y), trace_ids=sorted(junction.trace_ids))


def context_to_response(ctx: AnalysisContext, processing_time_ms: float = 0.0) -> AnalyzeResponse:
    """Build the analyze response from a completed pipeline run."""
    return AnalyzeResponse(
        trace_count=ctx.num_traces,
        junction_count=len(ctx.junctions),
        traces=[trace_to_output(t) for t in ctx.traces],
        junctions=[junction_to_output(j) for j in ctx.junctions],
        nets=ctx.nets,
        tolerance=ctx.config.tolerance,
        processing_time_ms=processing_time_ms,
        transforms_completed=len(ctx.completed_transforms),
        transforms_failed=len(ctx.errors),
        errors=ctx.errors,
    )
