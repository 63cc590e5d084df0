"""Shared constants for graphcycles.

This module provides centralized configuration defaults used across the
graph and analysis packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Enumeration limits: Defaults for bounding an enumeration run
- Cancellation: Polling cadence for cooperative cancellation

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Enumeration limits
    "DEFAULT_MAX_CYCLES",
    # Cancellation
    "DEFAULT_POLL_INTERVAL",
]

# ============================================================================
# ENUMERATION LIMITS
# ============================================================================

# Default cap on reported cycles. None means unbounded: the number of
# elementary cycles can grow exponentially with graph size (a complete
# digraph on 12 vertices already has over 10^8 of them), so callers
# enumerating untrusted graphs should set EnumerationConfig.max_cycles.
DEFAULT_MAX_CYCLES: int | None = None

# ============================================================================
# CANCELLATION
# ============================================================================

# Number of neighbor visits between two polls of a should_stop hook.
# The hook is also polled once before every search root regardless of
# this value.
DEFAULT_POLL_INTERVAL: int = 64
