import math
import random

import pytest

from hybridpath.graph import Edge, build_csr
from hybridpath.scheduler import GPU_BATCH_THRESHOLD, degree_threshold, hybrid_dijkstra


def _random_graph(seed, nodes=30, edges=120):
    rng = random.Random(seed)
    return build_csr(
        Edge(rng.randrange(nodes), rng.randrange(nodes), float(rng.randint(1, 9)))
        for _ in range(edges)
    )


def _check_shortest_paths(graph, source, distances):
    assert distances[source] == 0.0
    for u in range(graph.num_nodes):
        for v, w in graph.out_edges(u):
            assert distances[v] <= distances[u] + w
    for v in range(graph.num_nodes):
        if v == source or math.isinf(distances[v]):
            continue
        assert any(
            distances[u] + w == distances[v]
            for u in range(graph.num_nodes)
            for t, w in graph.out_edges(u)
            if t == v
        )


def test_small_worked_example():
    graph = build_csr([Edge(0, 1, 1.0), Edge(0, 2, 4.0), Edge(1, 2, 2.0), Edge(2, 3, 1.0)])
    assert hybrid_dijkstra(graph, 0) == [0.0, 1.0, 3.0, 4.0]


def test_unreachable_nodes_stay_infinite():
    graph = build_csr([Edge(1, 0, 1.0), Edge(1, 2, 1.0)])
    distances = hybrid_dijkstra(graph, 0)
    assert distances[0] == 0.0
    assert math.isinf(distances[1])
    assert math.isinf(distances[2])


@pytest.mark.parametrize("seed", range(6))
def test_random_graphs_satisfy_shortest_path_conditions(seed):
    graph = _random_graph(seed)
    distances = hybrid_dijkstra(graph, 0)
    _check_shortest_paths(graph, 0, distances)


@pytest.mark.parametrize("seed", range(4))
def test_batch_size_does_not_change_result(seed):
    graph = _random_graph(seed + 100)
    expected = hybrid_dijkstra(graph, 0)
    for batch_size in (1, 2, 5, GPU_BATCH_THRESHOLD):
        assert hybrid_dijkstra(graph, 0, batch_size) == expected


def test_hub_node_relaxed_through_batches():
    weights = [float(i + 1) for i in range(12)]
    graph = build_csr(Edge(0, i + 1, w) for i, w in enumerate(weights))
    assert graph.degree(0) >= degree_threshold(graph.degrees())
    distances = hybrid_dijkstra(graph, 0, batch_size=1)
    assert distances[1:] == weights


def test_invalid_source_and_batch_size():
    graph = build_csr([Edge(0, 1, 1.0)])
    with pytest.raises(ValueError):
        hybrid_dijkstra(graph, graph.num_nodes)
    with pytest.raises(ValueError):
        hybrid_dijkstra(graph, -1)
    with pytest.raises(ValueError):
        hybrid_dijkstra(graph, 0, batch_size=0)


def test_threshold_of_uniform_degrees_is_that_degree():
    assert degree_threshold([5, 5, 5, 5]) == 5


def test_threshold_at_least_median():
    rng = random.Random(7)
    for _ in range(20):
        degrees = [rng.randrange(50) for _ in range(rng.randint(1, 15))]
        assert degree_threshold(degrees) >= sorted(degrees)[len(degrees) // 2]


def test_threshold_of_nothing_raises():
    with pytest.raises(ValueError):
        degree_threshold([])