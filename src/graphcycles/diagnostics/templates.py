"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and consistently formatted, and documents every
    error case in one place.
    """

    @staticmethod
    def graph_type_unsupported(type_name: str) -> Diagnostic:
        """Object cannot be adapted to the CycleGraph protocol.

        Args:
            type_name: Name of the rejected object's type

        Returns:
            Diagnostic for GRAPH_TYPE_UNSUPPORTED
        """
        msg = f"Cannot enumerate cycles of a '{type_name}' object"
        return Diagnostic(
            code=DiagnosticCode.GRAPH_TYPE_UNSUPPORTED,
            message=msg,
            hint=(
                "Pass an object with vertices(), successors() and subgraph() "
                "methods, or a mapping from vertex to successors"
            ),
        )

    @staticmethod
    def vertex_invalid(vertex: object) -> Diagnostic:
        """Vertex identifier cannot be stored in a graph.

        Args:
            vertex: The rejected identifier

        Returns:
            Diagnostic for VERTEX_INVALID
        """
        msg = f"Invalid vertex identifier {vertex!r}"
        return Diagnostic(
            code=DiagnosticCode.VERTEX_INVALID,
            message=msg,
            hint="Vertices must be hashable and not None",
        )

    @staticmethod
    def vertex_not_found(vertex: object) -> Diagnostic:
        """Vertex is not a member of the graph or view.

        Args:
            vertex: The missing vertex

        Returns:
            Diagnostic for VERTEX_NOT_FOUND
        """
        msg = f"Vertex {vertex!r} is not in the graph"
        return Diagnostic(
            code=DiagnosticCode.VERTEX_NOT_FOUND,
            message=msg,
            hint="Add the vertex before querying its successors",
        )

    @staticmethod
    def enumeration_cancelled(cycles_found: int) -> Diagnostic:
        """Enumeration stopped by a should_stop hook.

        Args:
            cycles_found: Number of cycles reported before cancellation

        Returns:
            Diagnostic for ENUMERATION_CANCELLED
        """
        msg = f"Cycle enumeration cancelled after {cycles_found} cycle(s)"
        return Diagnostic(
            code=DiagnosticCode.ENUMERATION_CANCELLED,
            message=msg,
            hint="Cycles reported before cancellation are complete and valid",
        )

    @staticmethod
    def config_value_invalid(field_name: str, value: object) -> Diagnostic:
        """Configuration field holds an out-of-range value.

        Args:
            field_name: Name of the offending EnumerationConfig field
            value: The rejected value

        Returns:
            Diagnostic for CONFIG_VALUE_INVALID
        """
        msg = f"{field_name} must be positive, got {value!r}"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_VALUE_INVALID,
            message=msg,
        )
