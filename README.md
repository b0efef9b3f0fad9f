# hybridpath

hybridpath computes single-source shortest paths on weighted directed graphs.
It uses a Dijkstra scheduler that splits the work by node degree.

- Ordinary nodes are taken from a priority queue and their edges are relaxed
  one at a time.
- High-degree nodes are collected into batches, and each batch is relaxed in
  one go.
- The nodes whose distances improve in a batch go back onto the queue. This
  happens at the next dispatch, with results alternating between two slots.

A node counts as high-degree when its out-degree is at least the threshold.
The threshold is the median out-degree plus twice the population standard
deviation of the out-degrees, truncated to an integer.

## Installation

```
pip install .
```

## Command line

```
hybridpath --graph edges.txt --source 0
```

`python -m hybridpath.cli` runs the same command.

### The graph file

The graph file holds whitespace-separated `u v weight` triples, normally one
per line.

- Node ids are non-negative integers.
- The number of nodes is the largest id seen plus one.
- Reading stops quietly at the first triple that is incomplete or malformed.

### Options

| Option | Meaning |
| --- | --- |
| `--graph` | Path to the edge list (required) |
| `--source` | Source node id (default `0`) |
| `--sigma_thresh` | Accepted for compatibility (default `2.0`); it does not change the degree threshold |

Unrecognised arguments are ignored.

### Output

The command prints three things:

- the node and edge counts;
- the run time in milliseconds;
- the distances to node 0 and to the last node, with four decimals.

It exits with status 1 in any of these cases:

- `--graph` is missing;
- the file cannot be opened;
- the source node lies outside the graph.

## Library use

```python
from hybridpath.graph import parse_edges, build_csr
from hybridpath.scheduler import hybrid_dijkstra

edges = parse_edges(["0 1 1.5", "1 2 2.0", "0 2 5.0"])
graph = build_csr(edges)
distances = hybrid_dijkstra(graph, 0, 4096)
print(distances)  # [0.0, 1.5, 3.5]
```

### `hybridpath.graph`

- `Edge(u, v, w)` is a frozen dataclass for one directed, weighted edge.
- `CSRGraph(row_ptr, col_idx, weights)` is a frozen compressed sparse row
  graph. Its arrays are validated on construction, and `ValueError` is raised
  for inconsistent input. It provides:
  - `num_nodes` and `num_edges`;
  - `degree(node)`;
  - `degrees()`;
  - `out_edges(node)`, which gives `(target, weight)` pairs.

  Out-of-range nodes raise `IndexError`.
- `parse_edges(lines)` yields `Edge` objects from text lines.
- `load_edge_list(path)` reads every edge from a file.
- `build_csr(edges)` builds a `CSRGraph`. Edges keep their input order within
  each row.
- `INF_DIST` is the distance given to unreachable nodes (`math.inf`).

### `hybridpath.relax`

`relax_batch(graph, active_nodes, distances)` relaxes every out-edge of the
given nodes, updating `distances` in place. Candidates aimed at the same
target are reduced to their minimum first. It returns the ids of the improved
nodes in ascending order.

### `hybridpath.scheduler`

- `degree_threshold(degrees)` returns the high-degree cut-off. It raises
  `ValueError` for an empty sequence.
- `hybrid_dijkstra(graph, source, batch_size=GPU_BATCH_THRESHOLD)` returns the
  list of distances from `source`. The default batch size is 4096.

  It raises `ValueError` in either of these cases:
  - the source is outside the graph;
  - `batch_size` is below 1.

Nodes that cannot be reached from the source keep the distance `inf`.

## What it does not do

Batches of high-degree nodes are relaxed in the same process, node after
node. Nothing runs in parallel or on a separate device.

The threshold is always median plus two standard deviations. `--sigma_thresh`
does not change it.

## Tests

```
pip install .[test]
pytest
```