"""Cycle analysis algorithms.

Provides strongly connected component decomposition, the Johnson circuit
search, the least-vertex enumeration driver and cycle canonicalization.

Python 3.13+.
"""

from .canonical import canonicalize_cycle, cycle_edges, make_cycle_key
from .enumeration import (
    Break,
    count_cycles,
    find_cycles,
    iter_cycles,
    visit_all_cycles,
    visit_cycles,
)
from .scc import component_containing, has_cycle_through, strongly_connected_components
from .search import CircuitSearch, StopPoller

__all__ = [
    "Break",
    "CircuitSearch",
    "StopPoller",
    "canonicalize_cycle",
    "component_containing",
    "count_cycles",
    "cycle_edges",
    "find_cycles",
    "has_cycle_through",
    "iter_cycles",
    "make_cycle_key",
    "strongly_connected_components",
    "visit_all_cycles",
    "visit_cycles",
]
