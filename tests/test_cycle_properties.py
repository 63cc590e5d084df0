"""Property-based tests for cycle enumeration.

Checks find_cycles against a brute-force reference on small random
graphs, plus structural properties that hold for every output.
"""

from __future__ import annotations

from math import comb, factorial

import pytest
from hypothesis import event, given, settings

from graphcycles import (
    DiGraph,
    EnumerationConfig,
    count_cycles,
    find_cycles,
    iter_cycles,
    make_cycle_key,
    visit_all_cycles,
)
from tests.fuzz.shadow_cycles import is_elementary_cycle, shadow_cycles
from tests.strategies import adjacency_graphs, digraphs, edge_lists


def _complete_digraph(n: int) -> DiGraph:
    return DiGraph.from_edges([(i, j) for i in range(n) for j in range(n) if i != j])


class TestAgainstReference:
    """Differential tests against the exhaustive-search reference."""

    @given(graph=digraphs(max_nodes=6))
    @settings(max_examples=150)
    def test_matches_reference(self, graph: DiGraph) -> None:
        """PROPERTY: Exactly the cycles found by exhaustive search."""
        cycles = find_cycles(graph)
        event(f"cycles={min(len(cycles), 10)}")
        assert len(cycles) == len(set(cycles))
        assert set(cycles) == shadow_cycles(graph)

    @given(edges=edge_lists())
    @settings(max_examples=150)
    def test_parallel_edges_and_loops(self, edges: list[tuple[int, int]]) -> None:
        """PROPERTY: Multigraph edge lists agree with the reference."""
        graph = DiGraph.from_edges(edges)
        assert set(find_cycles(graph)) == shadow_cycles(graph)


class TestStructuralProperties:
    """Properties of each reported cycle."""

    @given(graph=digraphs())
    @settings(max_examples=150)
    def test_every_cycle_is_elementary(self, graph: DiGraph) -> None:
        """PROPERTY: Consecutive vertices are edges, closing edge included."""
        for cycle in find_cycles(graph):
            assert is_elementary_cycle(graph, cycle)

    @given(graph=digraphs())
    @settings(max_examples=150)
    def test_anchored_at_least_vertex(self, graph: DiGraph) -> None:
        """PROPERTY: Each cycle starts at its smallest vertex by graph index."""
        for cycle in find_cycles(graph):
            assert cycle[0] == min(cycle, key=graph.index_of)

    @given(graph=digraphs())
    @settings(max_examples=150)
    def test_no_rotation_duplicates(self, graph: DiGraph) -> None:
        """PROPERTY: No two cycles are rotations of each other."""
        cycles = find_cycles(graph)
        keys = [make_cycle_key(c, key=graph.index_of) for c in cycles]
        assert len(keys) == len(set(keys))

    @given(adjacency=adjacency_graphs(allow_cycles=False))
    @settings(max_examples=100)
    def test_acyclic_graphs_have_no_cycles(self, adjacency: dict[str, list[str]]) -> None:
        """PROPERTY: DAGs produce nothing."""
        assert find_cycles(adjacency) == []

    @given(adjacency=adjacency_graphs(allow_cycles=True))
    @settings(max_examples=100)
    def test_forced_cycle_found(self, adjacency: dict[str, list[str]]) -> None:
        """PROPERTY: Graphs with an injected cycle produce at least one."""
        assert count_cycles(adjacency) >= 1


class TestFormsAgree:
    """Collecting, streaming and visitor forms report identical sequences."""

    @given(graph=digraphs())
    @settings(max_examples=100)
    def test_all_forms_same_sequence(self, graph: DiGraph) -> None:
        """PROPERTY: find, iter and visit produce the same ordered cycles."""
        visited: list[tuple[object, ...]] = []
        visit_all_cycles(graph, lambda _g, c: visited.append(c))
        collected = find_cycles(graph)
        assert list(iter_cycles(graph)) == collected
        assert visited == collected
        assert count_cycles(graph) == len(collected)

    @given(graph=digraphs())
    @settings(max_examples=100)
    def test_max_cycles_is_prefix(self, graph: DiGraph) -> None:
        """PROPERTY: A cycle limit truncates the full sequence."""
        full = find_cycles(graph)
        limited = find_cycles(graph, EnumerationConfig(max_cycles=2))
        assert limited == full[:2]


class TestCompleteDigraphs:
    """Known cycle counts of complete digraphs."""

    @pytest.mark.parametrize(
        ("n", "expected"), [(1, 0), (2, 1), (3, 5), (4, 20), (5, 84), (6, 409)]
    )
    def test_complete_digraph_count(self, n: int, expected: int) -> None:
        """K_n has sum over k of C(n, k) * (k - 1)! cycles of length k >= 2."""
        assert sum(comb(n, k) * factorial(k - 1) for k in range(2, n + 1)) == expected
        assert count_cycles(_complete_digraph(n)) == expected

    def test_complete_digraph_with_loops(self) -> None:
        """Adding a self-loop on every vertex adds n one-vertex cycles."""
        n = 4
        graph = _complete_digraph(n)
        for v in range(n):
            graph.add_edge(v, v)
        assert count_cycles(graph) == 20 + n
