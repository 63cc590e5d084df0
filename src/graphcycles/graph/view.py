"""Induced subgraph views.

An ``InducedSubgraph`` restricts a parent graph to a vertex subset without
copying adjacency. Successor queries filter the parent's neighbors on
access, so building a view costs O(|subset|) regardless of edge count.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from graphcycles.diagnostics import ErrorTemplate, VertexNotFoundError

if TYPE_CHECKING:
    from .protocol import CycleGraph, Vertex

__all__ = ["InducedSubgraph"]


class InducedSubgraph:
    """Read-only restriction of a graph to a vertex subset.

    Vertices keep the parent's order. Only edges with both endpoints in the
    subset are visible, and parallel edges collapse to a single successor.
    Requested vertices that are not in the parent are ignored, so an empty
    or disjoint subset simply produces an empty view.

    Views compose: ``view.subgraph(...)`` restricts against the view, and
    its successors are filtered through every enclosing view.

    Attributes:
        parent: The graph (or view) this view restricts
    """

    __slots__ = ("_members", "_order", "parent")

    def __init__(self, parent: CycleGraph, vertices: Iterable[Vertex]) -> None:
        requested = set(vertices)
        self.parent = parent
        self._order: tuple[Vertex, ...] = tuple(
            v for v in parent.vertices() if v in requested
        )
        self._members: frozenset[Vertex] = frozenset(self._order)

    def vertices(self) -> Sequence[Vertex]:
        return self._order

    def successors(self, vertex: Vertex) -> list[Vertex]:
        if vertex not in self._members:
            raise VertexNotFoundError(ErrorTemplate.vertex_not_found(vertex))
        members = self._members
        # dict preserves first-occurrence order while dropping parallel edges
        return list(dict.fromkeys(w for w in self.parent.successors(vertex) if w in members))

    def subgraph(self, vertices: Iterable[Vertex]) -> InducedSubgraph:
        return InducedSubgraph(self, vertices)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._members

    def __len__(self) -> int:
        return len(self._order)

    def __repr__(self) -> str:
        return f"InducedSubgraph(vertices={list(self._order)!r})"
