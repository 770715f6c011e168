"""Transform registry — every analysis step is a function registered via decorator.

Usage:
    @transform(id="T1.02", layer=Layer.GEOMETRY, dependencies=["T0.01"])
    def trace_metrics(ctx: AnalysisContext) -> None:
        for trace in ctx.traces:
            trace.features["length"] = polyline_length(trace.as_array())

Adding a step = one module under engine/layerN with the decorator.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from tracesight.engine.context import AnalysisContext

logger = logging.getLogger(__name__)

TransformFn = Callable[["AnalysisContext"], None]


class Layer(enum.IntEnum):
    PARSING = 0
    GEOMETRY = 1
    CONNECTIVITY = 2


@dataclass
class TransformSpec:
    id: str
    layer: Layer
    fn: TransformFn
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class TransformRegistry:
    """Registry of transforms keyed by id."""

    def __init__(self) -> None:
        self._transforms: dict[str, TransformSpec] = {}

    def register(self, spec: TransformSpec) -> None:
        if spec.id in self._transforms:
            raise ValueError(f"Duplicate transform ID: {spec.id}")
        self._transforms[spec.id] = spec
        logger.debug("Registered transform %s (%s)", spec.id, spec.layer.name)

    def get(self, transform_id: str) -> TransformSpec:
        return self._transforms[transform_id]

    def get_layer(self, layer: Layer) -> list[TransformSpec]:
        return sorted((s for s in self._transforms.values() if s.layer == layer), key=lambda s: s.id)

    def all(self) -> list[TransformSpec]:
        return sorted(self._transforms.values(), key=lambda s: (s.layer, s.id))

    def resolve_order(self, requested_ids: set[str] | None = None) -> list[TransformSpec]:
        """Topological order of the requested transforms (all when None).

        Dependencies of requested transforms are pulled in even when they
        weren't asked for; a transform depending on an unknown id is run as if
        that dependency were satisfied.
        """
        pool = self._transforms
        if requested_ids is not None:
            needed: set[str] = set()
            stack = list(requested_ids)
            while stack:
                tid = stack.pop()
                if tid in needed or tid not in pool:
                    continue
                needed.add(tid)
                stack.extend(pool[tid].dependencies)
            pool = {k: v for k, v in pool.items() if k in needed}

        # Kahn's algorithm; ties broken by id so runs are reproducible
        waiting: dict[str, set[str]] = {
            tid: {d for d in spec.dependencies if d in pool} for tid, spec in pool.items()
        }
        ready = sorted(tid for tid, deps in waiting.items() if not deps)
        ordered: list[TransformSpec] = []

        while ready:
            tid = ready.pop(0)
            ordered.append(pool[tid])
            for other_id, deps in waiting.items():
                if tid in deps:
                    deps.discard(tid)
                    if not deps:
                        ready.append(other_id)
            ready.sort()

        if len(ordered) != len(pool):
            stuck = set(pool) - {s.id for s in ordered}
            raise ValueError(f"Circular dependency detected among: {sorted(stuck)}")

        return ordered

    @property
    def count(self) -> int:
        return len(self._transforms)


# Module-level singleton
_registry = TransformRegistry()


def get_registry() -> TransformRegistry:
    return _registry


def transform(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a transform function."""

    def decorator(fn: TransformFn) -> TransformFn:
        _registry.register(
            TransformSpec(
                id=id,
                layer=layer,
                fn=fn,
                dependencies=dependencies or [],
                description=description,
            )
        )
        return fn

    return decorator
