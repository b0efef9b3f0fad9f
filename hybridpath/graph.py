"""Edge lists and the compressed sparse row graph built from them."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import accumulate, islice, pairwise
from os import PathLike

INF_DIST = math.inf
_MAX_NODE_ID = 0xFFFFFFFF


@dataclass(frozen=True)
class Edge:
    """A directed, weighted edge from ``u`` to ``v``."""

    u: int
    v: int
    w: float


@dataclass(frozen=True)
class CSRGraph:
    """A static directed graph in compressed sparse row form."""

    row_ptr: tuple[int, ...]
    col_idx: tuple[int, ...]
    weights: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "row_ptr", tuple(self.row_ptr))
        object.__setattr__(self, "col_idx", tuple(self.col_idx))
        object.__setattr__(self, "weights", tuple(float(w) for w in self.weights))
        if not self.row_ptr:
            raise ValueError("row_ptr must hold at least one entry")
        if len(self.col_idx) != len(self.weights):
            raise ValueError("col_idx and weights must have the same length")
        if self.row_ptr[0] != 0 or self.row_ptr[-1] != len(self.col_idx):
            raise ValueError("row_ptr must start at 0 and end at the edge count")
        if any(a > b for a, b in pairwise(self.row_ptr)):
            raise ValueError("row_ptr must be non-decreasing")
        if any(not 0 <= v < self.num_nodes for v in self.col_idx):
            raise ValueError("col_idx refers to a node outside the graph")

    @property
    def num_nodes(self) -> int:
        return len(self.row_ptr) - 1

    @property
    def num_edges(self) -> int:
        return len(self.col_idx)

    def _check(self, node: int) -> None:
        if not 0 <= node < self.num_nodes:
            raise IndexError(f"node {node} is outside the graph ({self.num_nodes} nodes)")

    def degree(self, node: int) -> int:
        """Number of edges leaving ``node``."""
        self._check(node)
        return self.row_ptr[node + 1] - self.row_ptr[node]

    def degrees(self) -> list[int]:
        """Out-degree of every node, in node order."""
        return [b - a for a, b in pairwise(self.row_ptr)]

    def out_edges(self, node: int) -> Iterator[tuple[int, float]]:
        """Yield ``(target, weight)`` for each edge leaving ``node``."""
        self._check(node)
        start, end = self.row_ptr[node], self.row_ptr[node + 1]
        return zip(self.col_idx[start:end], self.weights[start:end])


def _node_id(token: str) -> int:
    if not (token.isascii() and token.isdigit()):
        raise ValueError(f"not a node id: {token!r}")
    value = int(token)
    if value > _MAX_NODE_ID:
        raise ValueError(f"node id out of range: {token!r}")
    return value


def _weight(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"not a finite weight: {token!r}")
    return value


def parse_edges(lines: Iterable[str]) -> Iterator[Edge]:
    """Yield edges from whitespace-separated ``u v weight`` triples.

    Reading stops quietly at the first triple that is incomplete or malformed.
    """
    tokens = (token for line in lines for token in line.split())
    while True:
        triple = list(islice(tokens, 3))
        if len(triple) < 3:
            return
        try:
            edge = Edge(_node_id(triple[0]), _node_id(triple[1]), _weight(triple[2]))
        except ValueError:
            return
        yield edge


def load_edge_list(path: str | PathLike[str]) -> list[Edge]:
    """Read every edge from an edge-list file."""
    with open(path, encoding="utf-8") as handle:
        return list(parse_edges(handle))


def build_csr(edges: Iterable[Edge]) -> CSRGraph:
    """Build a CSR graph; edges keep their input order within each row."""
    edges = list(edges)
    num_nodes = max((max(e.u, e.v) for e in edges), default=0) + 1

    counts = [0] * num_nodes
    for e in edges:
        counts[e.u] += 1
    row_ptr = list(accumulate(counts, initial=0))

    col_idx = [0] * len(edges)
    weights = [0.0] * len(edges)
    cursor = row_ptr[:-1]
    for e in edges:
        slot = cursor[e.u]
        cursor[e.u] += 1
        col_idx[slot] = e.v
        weights[slot] = e.w

    return CSRGraph(tuple(row_ptr), tuple(col_idx), tuple(weights))