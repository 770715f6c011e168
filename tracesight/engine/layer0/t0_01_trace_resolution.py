"""T0.01 — Path Resolution.

Parse every trace's path data, resolve it to absolute coordinates and derive
the polyline, endpoints and coarse direction. Each trace is replaced by its
enriched copy.
"""

from __future__ import annotations

from tracesight.engine.context import AnalysisContext
from tracesight.engine.registry import Layer, transform
from tracesight.geometry.traces import analyze_trace


@transform(
    id="T0.01",
    layer=Layer.PARSING,
    description="Resolve path commands to absolute trace geometry",
)
def trace_resolution(ctx: AnalysisContext) -> None:
    ctx.traces = [analyze_trace(trace) for trace in ctx.traces]
