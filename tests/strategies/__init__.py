"""Hypothesis strategies for graphcycles property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules.

Usage:
    from tests.strategies import adjacency_graphs, digraphs
    from tests.strategies.graph import cycle_paths, edge_lists

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - adjacency_graphs, cycle_paths
"""

from .graph import adjacency_graphs, cycle_paths, digraphs, edge_lists, node_names

__all__ = [
    "adjacency_graphs",
    "cycle_paths",
    "digraphs",
    "edge_lists",
    "node_names",
]
