"""T2.02 — Net Labelling.

Traces = nodes, edges = shared junction. Each connected component is one
electrical net. Nets are numbered in order of their first trace.
"""

from __future__ import annotations

from tracesight.engine.context import AnalysisContext
from tracesight.engine.registry import Layer, transform


def _union_find_root(parent: list[int], x: int) -> int:
    while parent[x] != x:
        parent[x] = parent[parent[x]]
        x = parent[x]
    return x


def _union_find_merge(parent: list[int], rank: list[int], a: int, b: int) -> None:
    ra, rb = _union_find_root(parent, a), _union_find_root(parent, b)
    if ra == rb:
        return
    if rank[ra] < rank[rb]:
        ra, rb = rb, ra
    parent[rb] = ra
    if rank[ra] == rank[rb]:
        rank[ra] += 1


@transform(
    id="T2.02",
    layer=Layer.CONNECTIVITY,
    dependencies=["T2.01"],
    description="Label electrical nets from trace connectivity",
)
def net_labelling(ctx: AnalysisContext) -> None:
    n = ctx.num_traces
    index = {trace.id: i for i, trace in enumerate(ctx.traces)}

    parent = list(range(n))
    rank = [0] * n

    for junction in ctx.junctions:
        members = [index[tid] for tid in junction.trace_ids if tid in index]
        for other in members[1:]:
            _union_find_merge(parent, rank, members[0], other)

    root_to_net: dict[int, int] = {}
    nets: dict[int, list[str]] = {}
    for i, trace in enumerate(ctx.traces):
        root = _union_find_root(parent, i)
        net_id = root_to_net.setdefault(root, len(root_to_net))
        trace.net_id = net_id
        nets.setdefault(net_id, []).append(trace.id)

    ctx.nets = nets
    for trace in ctx.traces:
        trace.features["net_size"] = len(nets[trace.net_id])
