"""Degree-aware hybrid Dijkstra shortest paths over CSR graphs."""

__version__ = "0.1.0"