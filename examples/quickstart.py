"""Quickstart example for graphcycles.

This example demonstrates the enumeration entry points on small graphs.

Note: The number of elementary cycles can grow exponentially with graph
size. On large dense graphs prefer iter_cycles or a visitor together with
EnumerationConfig(max_cycles=...).
"""

import threading

from graphcycles import (
    Break,
    DiGraph,
    EnumerationCancelledError,
    EnumerationConfig,
    count_cycles,
    find_cycles,
    iter_cycles,
    visit_all_cycles,
    visit_cycles,
)

# Example 1: Collecting form
print("=" * 50)
print("Example 1: find_cycles")
print("=" * 50)

graph = DiGraph.from_edges([(0, 0), (0, 1), (0, 2), (1, 2), (2, 0), (2, 1), (2, 2)])
for cycle in find_cycles(graph):
    print(cycle)
# Output:
# (0,)
# (0, 1, 2)
# (0, 2)
# (1, 2)
# (2,)

# Example 2: Mapping adjacency with arbitrary vertex names
print("\n" + "=" * 50)
print("Example 2: Mapping Input")
print("=" * 50)

imports = {
    "app": ["models", "views"],
    "models": ["db"],
    "views": ["models", "app"],
    "db": [],
}
print(find_cycles(imports))
# Output: [('app', 'views')]

# Example 3: Streaming visitor
print("\n" + "=" * 50)
print("Example 3: visit_all_cycles")
print("=" * 50)

lengths: dict[int, int] = {}


def tally(_graph: object, cycle: tuple[object, ...]) -> None:
    lengths[len(cycle)] = lengths.get(len(cycle), 0) + 1


complete = DiGraph.from_edges([(i, j) for i in range(5) for j in range(5) if i != j])
visit_all_cycles(complete, tally)
print(dict(sorted(lengths.items())))
# Output: {2: 10, 3: 20, 4: 30, 5: 24}

# Example 4: Early termination
print("\n" + "=" * 50)
print("Example 4: visit_cycles with Break")
print("=" * 50)


def first_long_cycle(
    _graph: object, cycle: tuple[object, ...]
) -> Break[tuple[object, ...]] | None:
    if len(cycle) >= 4:
        return Break(cycle)
    return None


print(visit_cycles(complete, first_long_cycle))
# Output: (0, 1, 2, 3)

# Example 5: Limits and cancellation
print("\n" + "=" * 50)
print("Example 5: EnumerationConfig")
print("=" * 50)

print(count_cycles(complete, EnumerationConfig(max_cycles=7)))
# Output: 7

cancel = threading.Event()
config = EnumerationConfig(should_stop=cancel.is_set, poll_interval=1)
try:
    for n, _cycle in enumerate(iter_cycles(complete, config), start=1):
        if n == 3:
            cancel.set()
except EnumerationCancelledError as exc:
    print(f"Cancelled after {exc.cycles_found} cycles")
# Output: Cancelled after 3 cycles
