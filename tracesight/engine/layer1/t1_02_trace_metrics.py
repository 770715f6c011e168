"""T1.02 — Trace Metrics.

Polyline length, bounding box and segment count of each trace's resolved
points. Traces with non-finite points get no metrics.
"""

from __future__ import annotations

from tracesight.engine.context import AnalysisContext
from tracesight.engine.registry import Layer, transform
from tracesight.utils.geometry import bbox, polyline_length


@transform(
    id="T1.02",
    layer=Layer.GEOMETRY,
    dependencies=["T0.01"],
    description="Compute length, bounding box and segment count",
)
def trace_metrics(ctx: AnalysisContext) -> None:
    for trace in ctx.traces:
        if not trace.is_valid:
            continue
        pts = trace.as_array()
        trace.features["length"] = round(polyline_length(pts), 4)
        trace.features["bbox"] = bbox(pts)
        trace.features["segment_count"] = max(len(pts) - 1, 0)
