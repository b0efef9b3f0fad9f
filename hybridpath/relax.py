"""Batched edge relaxation for high-degree frontier nodes."""

from __future__ import annotations

import math
from collections.abc import Iterable, MutableSequence

from hybridpath.graph import CSRGraph


def relax_batch(
    graph: CSRGraph,
    active_nodes: Iterable[int],
    distances: MutableSequence[float],
) -> list[int]:
    """Relax every out-edge of the active nodes in place.

    Candidate distances aimed at the same target are reduced to their minimum
    before the target is updated. Returns the ids of nodes whose distance was
    lowered, in ascending order.
    """
    improved: set[int] = set()
    for u in active_nodes:
        dist_u = distances[u]
        best: dict[int, float] = {}
        for v, w in graph.out_edges(u):
            candidate = dist_u + w
            if candidate < best.get(v, math.inf):
                best[v] = candidate
        for v, candidate in best.items():
            if candidate < distances[v]:
                distances[v] = candidate
                improved.add(v)
    return sorted(improved)