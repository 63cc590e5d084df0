"""Cycle canonicalization.

Two cycles are the same elementary cycle when one is a rotation of the
other. These helpers choose one representative per rotation class so
cycles can be compared, deduplicated or used as dictionary keys.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from graphcycles.graph import Cycle, Vertex

__all__ = ["canonicalize_cycle", "cycle_edges", "make_cycle_key"]


def _open_form(cycle: Sequence[Vertex]) -> Sequence[Vertex]:
    """Drop the repeated closing vertex of a ``[a, b, c, a]`` cycle."""
    if len(cycle) > 1 and cycle[0] == cycle[-1]:
        return cycle[:-1]
    return cycle


def canonicalize_cycle(
    cycle: Sequence[Vertex],
    key: Callable[[Vertex], Any] | None = None,
) -> Cycle:
    """Rotate ``cycle`` so that its minimum vertex comes first.

    Direction is preserved: ``[b, c, a]`` becomes ``(a, b, c)``, never
    ``(a, c, b)``. Both open (``[a, b, c]``) and closed (``[a, b, c, a]``)
    forms are accepted; the result is always open.

    Args:
        cycle: Vertices of the cycle in traversal order
        key: Sort key selecting the minimum vertex (default: the vertices
             themselves, which must then be mutually comparable)

    Returns:
        Rotated cycle as a tuple

    Raises:
        ValueError: If cycle is empty

    Example:
        >>> canonicalize_cycle(["c", "a", "b"])
        ('a', 'b', 'c')
        >>> canonicalize_cycle(["c", "a", "b", "c"])
        ('a', 'b', 'c')
    """
    if not cycle:
        msg = "Cannot canonicalize an empty cycle"
        raise ValueError(msg)
    ring = _open_form(cycle)
    keyed = key if key is not None else _identity
    start = min(range(len(ring)), key=lambda i: keyed(ring[i]))
    return (*ring[start:], *ring[:start])


def make_cycle_key(
    cycle: Sequence[Vertex],
    key: Callable[[Vertex], Any] | None = None,
) -> Cycle:
    """Return a hashable key identical for every rotation of ``cycle``.

    Example:
        >>> make_cycle_key([2, 0, 1]) == make_cycle_key([1, 2, 0])
        True
        >>> make_cycle_key([0, 1, 2]) == make_cycle_key([0, 2, 1])
        False
    """
    return canonicalize_cycle(cycle, key)


def cycle_edges(cycle: Sequence[Vertex]) -> list[tuple[Vertex, Vertex]]:
    """Return the directed edges traversed by ``cycle``, closing edge last.

    Example:
        >>> cycle_edges((0, 1, 2))
        [(0, 1), (1, 2), (2, 0)]
        >>> cycle_edges(("v",))
        [('v', 'v')]
    """
    ring = _open_form(cycle)
    return [(ring[i], ring[(i + 1) % len(ring)]) for i in range(len(ring))]


def _identity(vertex: Vertex) -> Any:
    return vertex
