"""Pipeline orchestrator — runs transforms in dependency order with adaptive gating."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from tracesight.engine.config import AnalysisConfig
from tracesight.engine.context import AnalysisContext
from tracesight.engine.registry import Layer, TransformRegistry, TransformSpec, get_registry
from tracesight.models.trace import Trace

logger = logging.getLogger(__name__)

_LAYER_PACKAGES = ["layer0", "layer1", "layer2"]


def load_transforms() -> None:
    """Import all transform modules so @transform decorators fire."""
    for layer_name in _LAYER_PACKAGES:
        package = importlib.import_module(f"tracesight.engine.{layer_name}")
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package.__name__}.{module_name}")


class Pipeline:
    """Orchestrates the transform pipeline."""

    def __init__(self, registry: TransformRegistry | None = None) -> None:
        if registry is None:
            load_transforms()
            registry = get_registry()
        self.registry = registry

    def run(self, ctx: AnalysisContext) -> AnalysisContext:
        """Run every transform not gated off by the context's config."""
        start = time.perf_counter()

        skip_ids = self._adaptive_gate(ctx)
        requested = {s.id for s in self.registry.all()} - skip_ids
        ordered = self.registry.resolve_order(requested)

        logger.info(
            "Pipeline: %d transforms queued (%d skipped) for %d traces",
            len(ordered),
            len(skip_ids),
            ctx.num_traces,
        )

        for spec in ordered:
            self._run_one(ctx, spec)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d transforms in %.0fms, %d junctions",
            len(ctx.completed_transforms),
            len(ordered),
            total,
            len(ctx.junctions),
        )
        return ctx

    def run_layer(self, ctx: AnalysisContext, layer: Layer) -> AnalysisContext:
        """Run only transforms in a specific layer."""
        for spec in self.registry.get_layer(layer):
            self._run_one(ctx, spec)
        return ctx

    def _run_one(self, ctx: AnalysisContext, spec: TransformSpec) -> None:
        t0 = time.perf_counter()
        status = "ok"
        error = ""
        try:
            spec.fn(ctx)
            ctx.completed_transforms.add(spec.id)
        except Exception as e:
            ctx.errors[spec.id] = str(e)
            status = "error"
            error = str(e)
            logger.warning("  %s FAILED: %s", spec.id, e)

        elapsed_ms = round((time.perf_counter() - t0) * 1000, 1)
        if status == "ok":
            logger.debug("  %s completed in %.1fms", spec.id, elapsed_ms)

        ctx.log.append({
            "transform_id": spec.id,
            "description": spec.description,
            "layer": spec.layer.name,
            "elapsed_ms": elapsed_ms,
            "status": status,
            "error": error,
        })

    def _adaptive_gate(self, ctx: AnalysisContext) -> set[str]:
        """Transforms to skip for this run."""
        skip: set[str] = set()
        if not ctx.config.label_nets:
            skip.add("T2.02")  # Net labelling
        return skip


def create_pipeline() -> Pipeline:
    """Factory function for creating a pipeline instance."""
    return Pipeline()


def analyze_traces(traces: list[Trace], config: AnalysisConfig | None = None) -> AnalysisContext:
    """Run the full analysis over raw traces and return the report context."""
    ctx = AnalysisContext(traces=list(traces), config=config or AnalysisConfig())
    return create_pipeline().run(ctx)
