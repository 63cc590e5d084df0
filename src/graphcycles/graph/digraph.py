"""Adjacency-list directed graph and graph adaptation.

``DiGraph`` is the reference ``CycleGraph`` implementation: an
insertion-ordered adjacency list supporting self-loops and parallel edges.
``as_graph`` turns the inputs accepted by the public API (a CycleGraph or
a plain mapping adjacency) into a CycleGraph.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from graphcycles.diagnostics import (
    ErrorTemplate,
    GraphTypeError,
    InvalidVertexError,
    VertexNotFoundError,
)

from .protocol import CycleGraph, Vertex
from .view import InducedSubgraph

__all__ = ["DiGraph", "as_graph"]

logger = logging.getLogger(__name__)


class DiGraph:
    """Directed graph stored as an insertion-ordered adjacency list.

    Vertex order (and therefore vertex index) is insertion order. Edges are
    kept as a multiset: adding the same edge twice stores it twice, which
    ``edge_count`` reflects, but successors of an induced view and cycle
    enumeration treat parallel edges as one adjacency.

    Mutating a graph while one of its cycles is being enumerated is not
    supported.

    Example:
        >>> g = DiGraph.from_edges([(0, 1), (1, 2), (2, 0)])
        >>> list(g.vertices())
        [0, 1, 2]
        >>> g.successors(2)
        [0]
    """

    __slots__ = ("_adjacency", "_edge_count", "_index")

    def __init__(
        self,
        vertices: Iterable[Vertex] = (),
        edges: Iterable[tuple[Vertex, Vertex]] = (),
    ) -> None:
        self._adjacency: dict[Vertex, list[Vertex]] = {}
        self._index: dict[Vertex, int] = {}
        self._edge_count = 0
        for vertex in vertices:
            self.add_vertex(vertex)
        for source, target in edges:
            self.add_edge(source, target)

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[Vertex, Vertex]]) -> DiGraph:
        """Build a graph from ``(source, target)`` pairs.

        When every endpoint is a non-negative ``int``, the pairs are read as
        vertex indices: vertices ``0..max`` are all created in numeric order,
        so indices without edges become isolated vertices. Otherwise vertices
        are created in order of first appearance.

        Args:
            edges: Iterable of (source, target) pairs

        Returns:
            New DiGraph
        """
        pairs = list(edges)
        endpoints = [v for pair in pairs for v in pair]
        if endpoints and all(
            isinstance(v, int) and not isinstance(v, bool) and v >= 0 for v in endpoints
        ):
            return cls(range(max(endpoints) + 1), pairs)
        return cls((), pairs)

    @classmethod
    def from_adjacency(cls, adjacency: Mapping[Vertex, Iterable[Vertex]]) -> DiGraph:
        """Build a graph from a ``{vertex: successors}`` mapping.

        Keys become vertices in mapping order. Successors that are not keys
        are added as vertices after the keys, in order of first appearance.

        Args:
            adjacency: Mapping from vertex to an iterable of successors

        Returns:
            New DiGraph
        """
        graph = cls(adjacency.keys())
        for source, targets in adjacency.items():
            for target in targets:
                graph.add_edge(source, target)
        logger.debug(
            "Built DiGraph from adjacency: %d vertices, %d edges",
            graph.vertex_count,
            graph.edge_count,
        )
        return graph

    def add_vertex(self, vertex: Vertex) -> None:
        """Add ``vertex`` if absent; existing vertices keep their index.

        Raises:
            InvalidVertexError: If vertex is None or unhashable
        """
        if vertex is None:
            raise InvalidVertexError(ErrorTemplate.vertex_invalid(vertex))
        try:
            if vertex in self._index:
                return
        except TypeError as e:
            raise InvalidVertexError(ErrorTemplate.vertex_invalid(vertex)) from e
        self._index[vertex] = len(self._adjacency)
        self._adjacency[vertex] = []

    def add_edge(self, source: Vertex, target: Vertex) -> None:
        """Add the directed edge ``source -> target``, creating endpoints.

        Raises:
            InvalidVertexError: If either endpoint is None or unhashable
        """
        self.add_vertex(source)
        self.add_vertex(target)
        self._adjacency[source].append(target)
        self._edge_count += 1

    def has_edge(self, source: Vertex, target: Vertex) -> bool:
        return source in self._adjacency and target in self._adjacency[source]

    def index_of(self, vertex: Vertex) -> int:
        """Return the position of ``vertex`` in the vertex order.

        Raises:
            VertexNotFoundError: If vertex is not in the graph
        """
        try:
            return self._index[vertex]
        except KeyError:
            raise VertexNotFoundError(ErrorTemplate.vertex_not_found(vertex)) from None

    def vertices(self) -> Sequence[Vertex]:
        return tuple(self._adjacency)

    def successors(self, vertex: Vertex) -> list[Vertex]:
        """Return the out-neighbors of ``vertex``, parallel edges included.

        Raises:
            VertexNotFoundError: If vertex is not in the graph
        """
        try:
            return list(self._adjacency[vertex])
        except KeyError:
            raise VertexNotFoundError(ErrorTemplate.vertex_not_found(vertex)) from None

    def subgraph(self, vertices: Iterable[Vertex]) -> InducedSubgraph:
        return InducedSubgraph(self, vertices)

    @property
    def vertex_count(self) -> int:
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        """Number of edges, counting parallel edges separately."""
        return self._edge_count

    def __contains__(self, vertex: object) -> bool:
        try:
            return vertex in self._adjacency
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"DiGraph(vertices={self.vertex_count}, edges={self.edge_count})"


def as_graph(graph: CycleGraph | Mapping[Vertex, Iterable[Vertex]]) -> CycleGraph:
    """Adapt the inputs accepted by the enumeration API to a CycleGraph.

    Args:
        graph: A CycleGraph (returned unchanged) or a mapping adjacency
               such as ``{"a": {"b"}, "b": {"a"}}``

    Returns:
        A CycleGraph over the same vertices and edges

    Raises:
        GraphTypeError: If graph is neither a CycleGraph nor a Mapping
    """
    if isinstance(graph, CycleGraph):
        return graph
    if isinstance(graph, Mapping):
        return DiGraph.from_adjacency(graph)
    raise GraphTypeError(ErrorTemplate.graph_type_unsupported(type(graph).__name__))
