"""Diagnostic codes and data structures.

Defines error codes and the diagnostic record carried by exceptions.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Graph errors (construction and adaptation)
        2000-2999: Enumeration errors (run control)
        3000-3999: Configuration errors
    """

    # Graph errors (1000-1999)
    GRAPH_TYPE_UNSUPPORTED = 1001
    VERTEX_INVALID = 1002
    VERTEX_NOT_FOUND = 1003

    # Enumeration errors (2000-2999)
    ENUMERATION_CANCELLED = 2001

    # Configuration errors (3000-3999)
    CONFIG_VALUE_INVALID = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[VERTEX_NOT_FOUND]: Vertex 'x' is not in the graph
              = help: Add the vertex before querying its successors

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {_escape(self.message)}"]
        if self.hint:
            lines.append(f"  = help: {_escape(self.hint)}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    """Escape control characters so a diagnostic stays on its own lines."""
    return text.replace("\r", "\\r").replace("\n", "\\n").replace("\x1b", "\\x1b")
