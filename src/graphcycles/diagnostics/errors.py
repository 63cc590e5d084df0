"""graphcycles exception hierarchy with structured diagnostics.

All exceptions accept either a plain message or a Diagnostic object.
Cycle enumeration itself never raises on a well-formed finite graph;
these errors cover graph construction, adaptation and run control.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class GraphCyclesError(Exception):
    """Base exception for all graphcycles errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize GraphCyclesError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class GraphError(GraphCyclesError):
    """Error while building or adapting a graph."""


class GraphTypeError(GraphError, TypeError):
    """Object is neither a CycleGraph nor a mapping adjacency."""


class InvalidVertexError(GraphError, ValueError):
    """Vertex identifier cannot be stored (e.g. None)."""


class VertexNotFoundError(GraphError, KeyError):
    """Successors requested for a vertex outside the graph or view."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the formatted diagnostic readable.
        return str(self.args[0]) if self.args else ""


class EnumerationError(GraphCyclesError):
    """Error raised while enumerating cycles."""


class EnumerationCancelledError(EnumerationError):
    """Enumeration stopped because a should_stop hook returned true.

    Cycles delivered before the hook fired are complete and valid; the
    enumeration is simply partial.

    Attributes:
        cycles_found: Number of cycles reported before cancellation
    """

    def __init__(self, message: str | Diagnostic, *, cycles_found: int = 0) -> None:
        """Initialize EnumerationCancelledError.

        Args:
            message: Error message string OR Diagnostic object
            cycles_found: Number of cycles reported before cancellation
        """
        super().__init__(message)
        self.cycles_found = cycles_found
