"""Graph access protocol required by the cycle enumeration engine.

The engine never touches graph storage directly. Any object exposing the
three methods of ``CycleGraph`` can be enumerated: adjacency lists,
adjacency matrices, edge lists with an index, or adapters around third-party
graph libraries.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from typing import Protocol, runtime_checkable

__all__ = ["Cycle", "CycleGraph", "Vertex"]

type Vertex = Hashable
type Cycle = tuple[Vertex, ...]


@runtime_checkable
class CycleGraph(Protocol):
    """Protocol for directed graphs whose cycles can be enumerated.

    This is a Protocol (structural typing) rather than ABC so that existing
    graph classes can satisfy it without inheriting from graphcycles.

    Ordering contract:
        ``vertices()`` defines a total order over the graph: a vertex's
        position in that sequence is its index, and the "least" vertex of
        any set is the one with the smallest index. The order must stay
        fixed for the duration of an enumeration.

    Example:
        >>> from graphcycles import InducedSubgraph
        >>> class MatrixGraph:
        ...     def __init__(self, matrix):
        ...         self.matrix = matrix
        ...     def vertices(self):
        ...         return range(len(self.matrix))
        ...     def successors(self, vertex):
        ...         return [j for j, bit in enumerate(self.matrix[vertex]) if bit]
        ...     def subgraph(self, vertices):
        ...         return InducedSubgraph(self, vertices)
    """

    def vertices(self) -> Sequence[Vertex]:
        """Return all vertices in a stable, deterministic order."""
        ...  # pragma: no cover  # Protocol stub - not executable

    def successors(self, vertex: Vertex) -> Iterable[Vertex]:
        """Return the out-neighbors of ``vertex``.

        Parallel edges may repeat a neighbor; the engine visits it once.
        """
        ...  # pragma: no cover  # Protocol stub - not executable

    def subgraph(self, vertices: Iterable[Vertex]) -> CycleGraph:
        """Return a read-only view induced by ``vertices``."""
        ...  # pragma: no cover  # Protocol stub - not executable
