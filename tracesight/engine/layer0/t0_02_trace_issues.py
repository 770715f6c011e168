"""T0.02 — Trace Issues.

Flag malformed numbers, curve/arc commands kept as opaque points and traces
with no resolvable points. None of these stop the analysis.
"""

from __future__ import annotations

import logging

from tracesight.engine.context import AnalysisContext
from tracesight.engine.registry import Layer, transform
from tracesight.geometry.traces import find_trace_issues

logger = logging.getLogger(__name__)


@transform(
    id="T0.02",
    layer=Layer.PARSING,
    dependencies=["T0.01"],
    description="Record malformed, unsupported and empty trace issues",
)
def trace_issues(ctx: AnalysisContext) -> None:
    for trace in ctx.traces:
        trace.issues = find_trace_issues(trace)
        if not trace.is_valid:
            logger.debug("Trace %s has non-finite points", trace.id)
