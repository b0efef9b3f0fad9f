"""Hybrid shortest-path scheduling: sequential relaxation for ordinary
nodes, batched relaxation for high-degree nodes."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable

from hybridpath.graph import INF_DIST, CSRGraph
from hybridpath.relax import relax_batch

GPU_BATCH_THRESHOLD = 4096


def degree_threshold(degrees: Iterable[int]) -> int:
    """Return median degree plus twice the population standard deviation, truncated."""
    values = list(degrees)
    if not values:
        raise ValueError("degree threshold needs at least one node")
    n = len(values)
    median = sorted(values)[n // 2]
    mean = sum(values) / n
    variance = sum((d - mean) ** 2 for d in values) / n
    sigma = math.sqrt(variance)
    return median + int(2.0 * sigma)


def hybrid_dijkstra(
    graph: CSRGraph, source: int, batch_size: int = GPU_BATCH_THRESHOLD
) -> list[float]:
    """Return the shortest distance from ``source`` to every node.

    Nodes whose degree reaches the threshold are queued and relaxed in
    batches of ``batch_size``; a batch's improved nodes re-enter the queue
    one dispatch later, alternating between two result slots.
    """
    if not 0 <= source < graph.num_nodes:
        raise ValueError(
            f"source node {source} exceeds graph bounds ({graph.num_nodes} nodes)"
        )
    if batch_size < 1:
        raise ValueError("batch_size must be at least 1")

    degrees = graph.degrees()
    threshold = degree_threshold(degrees)
    distances = [INF_DIST] * graph.num_nodes
    distances[source] = 0.0
    heap: list[tuple[float, int]] = [(0.0, source)]
    pending: list[int] = []
    in_flight: list[list[int] | None] = [None, None]
    active = 0

    def ingest(slot: int) -> None:
        for v in in_flight[slot] or ():
            heapq.heappush(heap, (distances[v], v))
        in_flight[slot] = None

    def dispatch() -> None:
        nonlocal active
        if not pending:
            return
        if in_flight[active] is not None:
            ingest(active)
        in_flight[active] = relax_batch(graph, pending, distances)
        pending.clear()
        active = 1 - active

    while True:
        if heap:
            dist_u, u = heapq.heappop(heap)
            if dist_u > distances[u]:
                continue
            if degrees[u] >= threshold:
                pending.append(u)
                if len(pending) >= batch_size:
                    dispatch()
            else:
                for v, w in graph.out_edges(u):
                    new_dist = dist_u + w
                    if new_dist < distances[v]:
                        distances[v] = new_dist
                        heapq.heappush(heap, (new_dist, v))
        else:
            dispatch()
            busy = [slot for slot in (0, 1) if in_flight[slot] is not None]
            for slot in busy:
                ingest(slot)
            if not busy and not heap:
                return distances