"""Command line: load an edge list and report shortest distances."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence

from hybridpath.graph import build_csr, load_edge_list
from hybridpath.scheduler import hybrid_dijkstra

USAGE = (
    "Usage: hybridpath --graph <path> --source <id> [--sigma_thresh <float>]\n"
    "Options:\n"
    "  --graph         Path to edge list file (Format: u v weight per line)\n"
    "  --source        Source node ID (0-indexed)\n"
    "  --sigma_thresh  Threshold tuning parameter for GPU offload (Default: 2.0)\n"
)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the command."""
    parser = argparse.ArgumentParser(prog="hybridpath", add_help=False, usage=USAGE)
    parser.add_argument("--graph", default="")
    parser.add_argument("--source", type=int, default=0)
    parser.add_argument("--sigma_thresh", type=float, default=2.0)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; returns the process exit status."""
    args, _unknown = build_parser().parse_known_args(argv)

    if not args.graph:
        sys.stderr.write(USAGE)
        return 1

    try:
        edges = load_edge_list(args.graph)
    except OSError:
        print(f"IO Error: Cannot open graph file {args.graph}", file=sys.stderr)
        return 1

    graph = build_csr(edges)
    num_nodes = graph.num_nodes
    source = args.source
    if not 0 <= source < num_nodes:
        print(
            f"Domain Error: Source node {source} exceeds graph bounds ({num_nodes} nodes)",
            file=sys.stderr,
        )
        return 1

    print(
        f"[INFO] Graph initialized: V = {num_nodes}, E = {graph.num_edges}. "
        f"Target Source: {source}."
    )

    start = time.perf_counter()
    distances = hybrid_dijkstra(graph, source)
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    print(f"[INFO] Hybrid Dijkstra execution completed in {elapsed_ms:.3f} ms.")
    print(f"[DATA] Distance to node 0: {distances[0]:.4f}")
    if num_nodes > 1:
        print(f"[DATA] Distance to node {num_nodes - 1}: {distances[num_nodes - 1]:.4f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())