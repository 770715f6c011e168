"""T1.01 — Command Composition.

Count command letters per trace and classify what the trace is made of:
straight lines only, lines mixed with curves, curves only, or nothing.
"""

from __future__ import annotations

from tracesight.engine.context import AnalysisContext
from tracesight.engine.registry import Layer, transform
from tracesight.models.trace import CommandType


@transform(
    id="T1.01",
    layer=Layer.GEOMETRY,
    dependencies=["T0.01"],
    description="Count command types and classify trace composition",
)
def command_composition(ctx: AnalysisContext) -> None:
    for trace in ctx.traces:
        counts: dict[str, int] = {}
        for cmd in trace.commands:
            counts[cmd.type.value] = counts.get(cmd.type.value, 0) + 1

        opaque = sum(1 for cmd in trace.commands if cmd.opaque)
        straight = sum(
            n for letter, n in counts.items()
            if letter in ("L", "H", "V", "Z")
        )

        trace.features["command_counts"] = counts
        trace.features["subpath_count"] = counts.get(CommandType.MOVE_TO.value, 0)
        trace.features["is_closed"] = CommandType.CLOSE_PATH.value in counts

        if opaque and straight:
            trace.features["composition"] = "mixed"
        elif opaque:
            trace.features["composition"] = "curves"
        elif straight:
            trace.features["composition"] = "lines"
        else:
            trace.features["composition"] = "points"
