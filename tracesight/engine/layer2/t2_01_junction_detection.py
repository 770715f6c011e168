"""T2.01 — Junction Detection.

Snap every trace endpoint onto a grid of cell size ``config.tolerance``;
cells holding endpoints of two or more traces become junctions, and each
trace's connected_traces is rebuilt from them.
"""

from __future__ import annotations

from tracesight.engine.context import AnalysisContext
from tracesight.engine.registry import Layer, transform
from tracesight.geometry.junctions import build_junctions


@transform(
    id="T2.01",
    layer=Layer.CONNECTIVITY,
    dependencies=["T0.01"],
    description="Group shared endpoints into junctions and connect traces",
)
def junction_detection(ctx: AnalysisContext) -> None:
    ctx.junctions = build_junctions(ctx.traces, ctx.config.tolerance)
