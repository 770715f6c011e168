"""Junction detection and trace connectivity.

Endpoints are snapped onto a grid of cell size ``tolerance``; traces whose
endpoints land in the same cell meet at a junction. Two endpoints closer than
the tolerance can still land in neighbouring cells when they straddle a cell
edge; that split is accepted rather than searched for.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from tracesight.models.trace import Junction, Point, Trace

DEFAULT_TOLERANCE = 0.1

BucketKey = tuple[int, int]


def check_tolerance(tolerance: float) -> None:
    if not math.isfinite(tolerance) or tolerance <= 0:
        raise ValueError(f"tolerance must be a positive finite number, got {tolerance!r}")
    if not math.isfinite(1.0 / tolerance):
        raise ValueError(f"tolerance {tolerance!r} is too small to quantize coordinates")


def bucket_key(point: Point, tolerance: float) -> BucketKey | None:
    """Quantize a point; halves round up, as in JavaScript's Math.round.

    None when the point is not finite or its scaled coordinates overflow.
    """
    sx = point.x / tolerance + 0.5
    sy = point.y / tolerance + 0.5
    if not (math.isfinite(sx) and math.isfinite(sy)):
        return None
    return (math.floor(sx), math.floor(sy))


def find_junctions(traces: Iterable[Trace], tolerance: float = DEFAULT_TOLERANCE) -> list[Junction]:
    """Group traces by shared endpoint bucket. Does not touch the traces."""
    check_tolerance(tolerance)

    buckets: dict[BucketKey, list[str]] = {}
    for trace in traces:
        for point in trace.endpoints:
            key = bucket_key(point, tolerance)
            if key is None:
                continue
            ids = buckets.setdefault(key, [])
            # A trace whose both ends share a bucket is listed once
            if trace.id not in ids:
                ids.append(trace.id)

    return [
        Junction(point=Point(kx * tolerance, ky * tolerance), trace_ids=frozenset(ids))
        for (kx, ky), ids in buckets.items()
        if len(ids) >= 2
    ]


def connectivity_map(junctions: Iterable[Junction]) -> dict[str, set[str]]:
    """Symmetric id → connected ids mapping implied by the junctions."""
    mapping: dict[str, set[str]] = {}
    for junction in junctions:
        for a in junction.trace_ids:
            mapping.setdefault(a, set()).update(b for b in junction.trace_ids if b != a)
    return mapping


def build_junctions(traces: list[Trace], tolerance: float = DEFAULT_TOLERANCE) -> list[Junction]:
    """Find junctions and replace every trace's ``connected_traces`` with the result.

    Re-running on the same traces yields the same junctions and the same sets.
    """
    junctions = find_junctions(traces, tolerance)
    mapping = connectivity_map(junctions)
    for trace in traces:
        trace.connected_traces = set(mapping.get(trace.id, ()))
    return junctions
