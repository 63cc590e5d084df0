"""Elementary cycle enumeration driver.

Runs Johnson's least-vertex restart strategy: for each vertex ``s`` in
graph order, decompose the subgraph induced by ``s`` and every later vertex
into strongly connected components, search the component containing ``s``
for cycles through ``s``, then discard ``s``. Every elementary cycle has a
unique least vertex and is found only while that vertex is the root, so
each cycle is reported exactly once.

Public entry points:
    iter_cycles - Lazy generator of cycles
    find_cycles - Collect every cycle into a list
    visit_all_cycles - Call a visitor once per cycle
    visit_cycles - Call a visitor until it returns Break(value)
    count_cycles - Number of cycles

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from contextlib import closing
from dataclasses import dataclass
from typing import NoReturn

from graphcycles.config import EnumerationConfig
from graphcycles.diagnostics import EnumerationCancelledError, ErrorTemplate
from graphcycles.graph import Cycle, CycleGraph, Vertex, as_graph

from .scc import component_containing, has_cycle_through, strongly_connected_components
from .search import CircuitSearch, StopPoller

__all__ = [
    "Break",
    "count_cycles",
    "find_cycles",
    "iter_cycles",
    "visit_all_cycles",
    "visit_cycles",
]

logger = logging.getLogger(__name__)

type GraphInput = CycleGraph | Mapping[Vertex, Iterable[Vertex]]

_DEFAULT_CONFIG = EnumerationConfig()


@dataclass(frozen=True, slots=True)
class Break[B]:
    """Visitor return value that stops ``visit_cycles``.

    Attributes:
        value: Returned by ``visit_cycles`` once enumeration stops
    """

    value: B | None = None


def iter_cycles(
    graph: GraphInput,
    config: EnumerationConfig | None = None,
) -> Iterator[Cycle]:
    """Lazily yield every elementary cycle of ``graph``.

    Each cycle is a tuple of vertices starting at its least vertex (in the
    graph's vertex order) and following edge direction; the closing edge
    back to the first vertex is implied. Cycles are produced in search
    order, which is deterministic for a deterministic successor order.

    Args:
        graph: A CycleGraph, or a mapping adjacency such as
               ``{"a": {"b"}, "b": {"a"}}``
        config: Optional limits (max_cycles, should_stop)

    Yields:
        Cycles as tuples of vertices

    Raises:
        GraphTypeError: If graph cannot be adapted to a CycleGraph
        EnumerationCancelledError: If config.should_stop returned true

    Example:
        >>> list(iter_cycles({0: [1], 1: [2], 2: [0]}))
        [(0, 1, 2)]

    Complexity:
        Time: O((V + E)(C + 1)) for C cycles
        Space: O(V + E)
    """
    cycle_graph = as_graph(graph)
    config = config or _DEFAULT_CONFIG
    poller = StopPoller(config.should_stop, config.poll_interval)
    max_cycles = config.max_cycles

    remaining: list[Vertex] = list(cycle_graph.vertices())
    found = 0
    roots_searched = 0

    while remaining:
        least = remaining[0]
        if poller.check():
            _cancelled(found)

        view = cycle_graph.subgraph(remaining)
        component = component_containing(strongly_connected_components(view), least)

        if component is None or not has_cycle_through(view, component, least):
            logger.debug("Root %r starts no cycle; skipping", least)
        else:
            logger.debug("Searching root %r in component of %d vertices", least, len(component))
            roots_searched += 1
            search = CircuitSearch(view, least, component, poller)
            for cycle in search.search():
                found += 1
                yield cycle
                if max_cycles is not None and found >= max_cycles:
                    logger.info("Cycle enumeration stopped at max_cycles=%d", max_cycles)
                    return
            if search.cancelled:
                _cancelled(found)

        del remaining[0]

    logger.debug("Enumerated %d cycles from %d search roots", found, roots_searched)


def _cancelled(found: int) -> NoReturn:
    logger.warning("Cycle enumeration cancelled after %d cycles", found)
    raise EnumerationCancelledError(
        ErrorTemplate.enumeration_cancelled(found), cycles_found=found
    )


def find_cycles(
    graph: GraphInput,
    config: EnumerationConfig | None = None,
) -> list[Cycle]:
    """Find all elementary cycles of ``graph``.

    Args:
        graph: A CycleGraph or a mapping adjacency
        config: Optional limits (max_cycles, should_stop)

    Returns:
        List of cycles, each a tuple of vertices starting at its least vertex.
        Empty list if the graph is acyclic.

    Example:
        >>> from graphcycles import DiGraph
        >>> g = DiGraph.from_edges([(0, 1), (1, 2), (2, 0)])
        >>> cycles = find_cycles(g)
        >>> len(cycles), len(cycles[0])
        (1, 3)
    """
    return list(iter_cycles(graph, config))


def visit_all_cycles(
    graph: GraphInput,
    visitor: Callable[[CycleGraph, Cycle], object],
    config: EnumerationConfig | None = None,
) -> None:
    """Apply ``visitor`` to every cycle.

    The visitor receives the graph (after adaptation to a CycleGraph) and
    one cycle per call. Its return value is ignored.

    Args:
        graph: A CycleGraph or a mapping adjacency
        visitor: Callable invoked as ``visitor(graph, cycle)``
        config: Optional limits (max_cycles, should_stop)
    """
    cycle_graph = as_graph(graph)
    for cycle in iter_cycles(cycle_graph, config):
        visitor(cycle_graph, cycle)


def visit_cycles[B](
    graph: GraphInput,
    visitor: Callable[[CycleGraph, Cycle], Break[B] | object],
    config: EnumerationConfig | None = None,
) -> B | None:
    """Apply ``visitor`` to each cycle until it returns ``Break``.

    Any return value other than a ``Break`` instance continues the
    enumeration. When the visitor returns ``Break(value)``, no further
    cycles are searched and ``value`` is returned.

    Args:
        graph: A CycleGraph or a mapping adjacency
        visitor: Callable invoked as ``visitor(graph, cycle)``
        config: Optional limits (max_cycles, should_stop)

    Returns:
        The value of the first Break, or None if every cycle was visited

    Example:
        >>> def first_long(graph, cycle):
        ...     if len(cycle) > 2:
        ...         return Break(cycle)
        >>> visit_cycles({0: [0, 1], 1: [2], 2: [0]}, first_long)
        (0, 1, 2)
    """
    cycle_graph = as_graph(graph)
    with closing(iter_cycles(cycle_graph, config)) as cycles:
        for cycle in cycles:
            result = visitor(cycle_graph, cycle)
            if isinstance(result, Break):
                logger.info("Cycle enumeration stopped by visitor")
                return result.value
    return None


def count_cycles(
    graph: GraphInput,
    config: EnumerationConfig | None = None,
) -> int:
    """Count the elementary cycles of ``graph`` without retaining them."""
    return sum(1 for _ in iter_cycles(graph, config))
