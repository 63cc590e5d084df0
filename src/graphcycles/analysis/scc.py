"""Strongly connected component decomposition.

Implements Tarjan's algorithm with an explicit work stack instead of Python
recursion, so long chains and rings do not raise RecursionError.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graphcycles.graph import CycleGraph, Vertex

__all__ = [
    "component_containing",
    "has_cycle_through",
    "strongly_connected_components",
]


def strongly_connected_components(graph: CycleGraph) -> list[frozenset[Vertex]]:
    """Partition the vertices of ``graph`` into strongly connected components.

    Every vertex appears in exactly one component, including isolated
    vertices (as singletons). Components are returned in the order Tarjan's
    algorithm completes them, which is a reverse topological order of the
    condensation graph.

    Args:
        graph: Graph or induced view to decompose. Successors must be
               vertices of the same graph.

    Returns:
        List of components, each a frozenset of vertices.

    Example:
        >>> from graphcycles import DiGraph
        >>> g = DiGraph.from_edges([(0, 1), (1, 0), (1, 2)])
        >>> sorted(sorted(c) for c in strongly_connected_components(g))
        [[0, 1], [2]]

    Complexity:
        Time: O(V + E)
        Space: O(V)
    """
    index: dict[Vertex, int] = {}
    lowlink: dict[Vertex, int] = {}
    on_stack: set[Vertex] = set()
    scc_stack: list[Vertex] = []
    components: list[frozenset[Vertex]] = []
    counter = 0

    for root in graph.vertices():
        if root in index:
            continue

        index[root] = lowlink[root] = counter
        counter += 1
        scc_stack.append(root)
        on_stack.add(root)
        # Work stack entries: (vertex, iterator over remaining successors)
        work: list[tuple[Vertex, Iterator[Vertex]]] = [
            (root, iter(graph.successors(root)))
        ]

        while work:
            v, neighbors = work[-1]
            for w in neighbors:
                if w not in index:
                    index[w] = lowlink[w] = counter
                    counter += 1
                    scc_stack.append(w)
                    on_stack.add(w)
                    work.append((w, iter(graph.successors(w))))
                    break
                if w in on_stack:
                    lowlink[v] = min(lowlink[v], index[w])
            else:
                # All successors of v explored: propagate lowlink to the caller
                work.pop()
                if work:
                    parent = work[-1][0]
                    lowlink[parent] = min(lowlink[parent], lowlink[v])

                if lowlink[v] == index[v]:
                    members: list[Vertex] = []
                    while True:
                        w = scc_stack.pop()
                        on_stack.discard(w)
                        members.append(w)
                        if w == v:
                            break
                    components.append(frozenset(members))

    return components


def component_containing(
    components: Iterable[frozenset[Vertex]], vertex: Vertex
) -> frozenset[Vertex] | None:
    """Return the component that contains ``vertex``, or None."""
    for component in components:
        if vertex in component:
            return component
    return None


def has_cycle_through(
    graph: CycleGraph, component: frozenset[Vertex], vertex: Vertex
) -> bool:
    """Check whether ``component`` can hold any cycle through ``vertex``.

    A component of two or more vertices always does (strong connectivity
    gives a closed walk, hence an elementary cycle, through every member).
    A singleton does only when ``vertex`` carries a self-loop.
    """
    if len(component) > 1:
        return True
    return vertex in component and vertex in graph.successors(vertex)
