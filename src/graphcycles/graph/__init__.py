"""Graph access layer for cycle enumeration.

Exports:
    CycleGraph: Protocol the enumeration engine requires
    InducedSubgraph: Read-only view over a vertex subset
    DiGraph: Adjacency-list reference implementation
    as_graph: Adapt a CycleGraph or mapping adjacency to a CycleGraph

Python 3.13+.
"""

from .digraph import DiGraph, as_graph
from .protocol import Cycle, CycleGraph, Vertex
from .view import InducedSubgraph

__all__ = [
    "Cycle",
    "CycleGraph",
    "DiGraph",
    "InducedSubgraph",
    "Vertex",
    "as_graph",
]
