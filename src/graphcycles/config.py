"""Enumeration configuration.

Provides a single frozen dataclass that encapsulates the optional limits
of a cycle enumeration run. Every enumeration entry point accepts an
``EnumerationConfig``; omitting it enumerates every cycle.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from graphcycles.constants import DEFAULT_MAX_CYCLES, DEFAULT_POLL_INTERVAL
from graphcycles.diagnostics.templates import ErrorTemplate

__all__ = ["EnumerationConfig"]


@dataclass(frozen=True, slots=True)
class EnumerationConfig:
    """Immutable configuration for a cycle enumeration run.

    All fields have sensible defaults; ``EnumerationConfig()`` enumerates
    every cycle with no cancellation hook.

    Attributes:
        max_cycles: Stop after this many cycles have been reported
            (default: None, unbounded).
        should_stop: Cooperative cancellation hook. Polled before each
            search root and every ``poll_interval`` neighbor visits; when
            it returns true, enumeration raises EnumerationCancelledError
            (default: None).
        poll_interval: Neighbor visits between two ``should_stop`` polls
            (default: 64).

    Example:
        >>> import threading
        >>> from graphcycles import find_cycles
        >>> cancel = threading.Event()
        >>> config = EnumerationConfig(max_cycles=10, should_stop=cancel.is_set)
        >>> find_cycles({0: [1], 1: [0]}, config)
        [(0, 1)]
    """

    max_cycles: int | None = DEFAULT_MAX_CYCLES
    should_stop: Callable[[], bool] | None = None
    poll_interval: int = DEFAULT_POLL_INTERVAL

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_cycles is set and not positive, or if
                poll_interval is not positive.
        """
        if self.max_cycles is not None and self.max_cycles <= 0:
            msg = ErrorTemplate.config_value_invalid("max_cycles", self.max_cycles)
            raise ValueError(str(msg))
        if self.poll_interval <= 0:
            msg = ErrorTemplate.config_value_invalid("poll_interval", self.poll_interval)
            raise ValueError(str(msg))
