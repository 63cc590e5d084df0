"""Johnson circuit search rooted at a single vertex.

Finds every elementary cycle through a root vertex inside one strongly
connected component, using the blocked set and unblock map (B-lists) from
D. B. Johnson, "Finding all the elementary circuits of a directed graph",
SIAM Journal on Computing 4(1), 1975.

The recursive CIRCUIT procedure of the paper is simulated with an explicit
stack of frames, so the length of the current path is not bounded by the
interpreter recursion limit.

Python 3.13+.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from graphcycles.constants import DEFAULT_POLL_INTERVAL

if TYPE_CHECKING:
    from graphcycles.graph import Cycle, CycleGraph, Vertex

__all__ = ["CircuitSearch", "StopPoller"]


class StopPoller:
    """Rate-limited wrapper around a cooperative cancellation hook.

    ``tick()`` counts work units and consults the hook every ``interval``
    units; ``check()`` consults it immediately. Once the hook has returned
    true the poller stays stopped.
    """

    __slots__ = ("_countdown", "_interval", "_should_stop", "stopped")

    def __init__(
        self,
        should_stop: Callable[[], bool] | None,
        interval: int = DEFAULT_POLL_INTERVAL,
    ) -> None:
        self._should_stop = should_stop
        self._interval = interval
        self._countdown = interval
        self.stopped = False

    def check(self) -> bool:
        if not self.stopped and self._should_stop is not None and self._should_stop():
            self.stopped = True
        return self.stopped

    def tick(self) -> bool:
        if self._should_stop is None:
            return False
        self._countdown -= 1
        if self._countdown > 0:
            return self.stopped
        self._countdown = self._interval
        return self.check()


@dataclass(slots=True)
class _Frame:
    """One simulated activation of CIRCUIT(v)."""

    vertex: Vertex
    neighbors: Iterator[Vertex]
    found: bool = False


class CircuitSearch:
    """Enumerate the elementary cycles through ``root`` within ``component``.

    ``root`` must be the least vertex of ``component`` in the order of the
    enclosing enumeration: every cycle found is anchored there, and cycles
    through smaller vertices have already been reported by earlier roots.

    Search state (blocked set, unblock map, path stack) belongs to this
    instance and is created fresh by each ``search()`` call, so one root's
    bookkeeping never leaks into another's.

    Attributes:
        root: Start vertex of every emitted cycle
        component: Vertex set the search is confined to
        cancelled: True if the poller stopped the search early
    """

    __slots__ = ("_graph", "_neighbor_cache", "_poller", "cancelled", "component", "root")

    def __init__(
        self,
        graph: CycleGraph,
        root: Vertex,
        component: frozenset[Vertex],
        poller: StopPoller | None = None,
    ) -> None:
        self._graph = graph
        self.root = root
        self.component = component
        self._poller = poller
        self._neighbor_cache: dict[Vertex, tuple[Vertex, ...]] = {}
        self.cancelled = False

    def _neighbors(self, vertex: Vertex) -> tuple[Vertex, ...]:
        """Successors of ``vertex`` inside the component, parallel edges merged."""
        cached = self._neighbor_cache.get(vertex)
        if cached is None:
            component = self.component
            cached = tuple(
                dict.fromkeys(w for w in self._graph.successors(vertex) if w in component)
            )
            self._neighbor_cache[vertex] = cached
        return cached

    def search(self) -> Iterator[Cycle]:
        """Yield every elementary cycle through the root, root first.

        Each cycle is a fresh tuple listing the path from the root to the
        vertex whose edge closes the cycle. A self-loop on the root yields
        the one-element cycle ``(root,)``.
        """
        root = self.root
        poller = self._poller
        path: list[Vertex] = [root]
        blocked: set[Vertex] = {root}
        unblock_map: defaultdict[Vertex, set[Vertex]] = defaultdict(set)
        frames: list[_Frame] = [_Frame(root, iter(self._neighbors(root)))]

        while frames:
            frame = frames[-1]
            for w in frame.neighbors:
                if poller is not None and poller.tick():
                    self.cancelled = True
                    return
                if w == root:
                    yield tuple(path)
                    frame.found = True
                elif w not in blocked:
                    path.append(w)
                    blocked.add(w)
                    frames.append(_Frame(w, iter(self._neighbors(w))))
                    break
            else:
                # Neighbors exhausted: return from CIRCUIT(v)
                frames.pop()
                v = path.pop()
                if frame.found:
                    if frames:
                        frames[-1].found = True
                    _unblock(v, blocked, unblock_map)
                else:
                    for w in self._neighbors(v):
                        unblock_map[w].add(v)


def _unblock(
    vertex: Vertex,
    blocked: set[Vertex],
    unblock_map: defaultdict[Vertex, set[Vertex]],
) -> None:
    """Unblock ``vertex`` and, transitively, everything waiting on it."""
    pending = [vertex]
    while pending:
        u = pending.pop()
        if u in blocked:
            blocked.discard(u)
            waiting = unblock_map.pop(u, None)
            if waiting:
                pending.extend(waiting)
