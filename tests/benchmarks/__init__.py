"""Performance benchmarks for graphcycles.

Benchmarks use pytest-benchmark to measure and track performance of the
SCC decomposition and cycle enumeration to prevent regressions.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
