"""Diagnostic system for graphcycles errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    EnumerationCancelledError,
    EnumerationError,
    GraphCyclesError,
    GraphError,
    GraphTypeError,
    InvalidVertexError,
    VertexNotFoundError,
)
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "EnumerationCancelledError",
    "EnumerationError",
    "ErrorTemplate",
    "GraphCyclesError",
    "GraphError",
    "GraphTypeError",
    "InvalidVertexError",
    "VertexNotFoundError",
]
