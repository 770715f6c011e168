"""AnalysisContext — the single mutable state object flowing through all transforms.

Per-trace results → Trace derived fields and Trace.features
Cross-trace results → AnalysisContext.* (junctions, nets)
It is also the report handed back to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from tracesight.engine.config import AnalysisConfig
from tracesight.models.trace import Junction, Trace


@dataclass
class AnalysisContext:
    """Shared state flowing through the entire pipeline."""

    traces: list[Trace] = field(default_factory=list)
    config: AnalysisConfig = field(default_factory=AnalysisConfig)
    # Raw SVG code, when the traces came from a document
    svg_raw: str = ""

    # --- Cross-trace computed state (populated by Layer 2) ---
    junctions: list[Junction] = field(default_factory=list)
    # net_id → member trace ids
    nets: dict[int, list[str]] = field(default_factory=dict)

    # --- Pipeline metadata ---
    completed_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)
    # One entry per executed transform: id, layer, status, elapsed_ms, error
    log: list[dict[str, Any]] = field(default_factory=list)

    @property
    def num_traces(self) -> int:
        return len(self.traces)

    @property
    def invalid_traces(self) -> list[Trace]:
        return [t for t in self.traces if not t.is_valid]

    def get_trace(self, trace_id: str) -> Trace | None:
        for trace in self.traces:
            if trace.id == trace_id:
                return trace
        return None
