"""graphcycles - Elementary cycle enumeration for directed graphs.

Finds every elementary circuit (closed path with no repeated vertex) of a
directed graph using Johnson's algorithm, in time O((V + E)(C + 1)) for C
cycles. Works on any object implementing the CycleGraph protocol, or on a
plain mapping adjacency.

Public API:
    find_cycles - Collect all cycles into a list
    iter_cycles - Lazily yield cycles
    visit_all_cycles - Call a visitor once per cycle
    visit_cycles - Call a visitor until it returns Break(value)
    count_cycles - Count cycles
    DiGraph - Adjacency-list directed graph
    CycleGraph - Protocol for custom graph types
    EnumerationConfig - Optional limits (max_cycles, should_stop)

Exceptions:
    GraphCyclesError - Base exception class
    GraphError - Graph construction/adaptation errors
    EnumerationCancelledError - should_stop hook fired

Submodules:
    graphcycles.analysis - SCC decomposition, circuit search, canonicalization
    graphcycles.graph - Graph protocol, DiGraph, induced views
    graphcycles.diagnostics - Error codes, templates and exceptions

Example:
    >>> from graphcycles import DiGraph, find_cycles
    >>> g = DiGraph.from_edges([(0, 1), (1, 2), (2, 0)])
    >>> find_cycles(g)
    [(0, 1, 2)]

Caveat:
    The number of elementary cycles can be exponential in graph size.
    Collecting forms hold every cycle in memory; prefer iter_cycles or a
    visitor with EnumerationConfig.max_cycles on large dense graphs.

Reference:
    Donald B. Johnson, "Finding all the elementary circuits of a directed
    graph", SIAM Journal on Computing 4(1), 1975.
"""

from .analysis import (
    Break,
    canonicalize_cycle,
    count_cycles,
    find_cycles,
    iter_cycles,
    make_cycle_key,
    strongly_connected_components,
    visit_all_cycles,
    visit_cycles,
)
from .config import EnumerationConfig
from .diagnostics import (
    EnumerationCancelledError,
    EnumerationError,
    GraphCyclesError,
    GraphError,
    GraphTypeError,
    InvalidVertexError,
    VertexNotFoundError,
)
from .graph import Cycle, CycleGraph, DiGraph, InducedSubgraph, as_graph

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("graphcycles")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Break",
    "Cycle",
    "CycleGraph",
    "DiGraph",
    "EnumerationCancelledError",
    "EnumerationConfig",
    "EnumerationError",
    "GraphCyclesError",
    "GraphError",
    "GraphTypeError",
    "InducedSubgraph",
    "InvalidVertexError",
    "VertexNotFoundError",
    "__version__",
    "as_graph",
    "canonicalize_cycle",
    "count_cycles",
    "find_cycles",
    "iter_cycles",
    "make_cycle_key",
    "strongly_connected_components",
    "visit_all_cycles",
    "visit_cycles",
]
