"""Exceptions raised at the graph API boundary.

Every check happens before the graph is touched, so a call that raises
leaves vertex state exactly as it was.
"""
from __future__ import annotations

from algograph.graph.types import UNREACHABLE


class GraphError(Exception):
    """Base class for graph precondition failures."""


class IndexOutOfRangeError(GraphError, IndexError):
    """Raised when a vertex index falls outside [0, vertex_count)."""

    def __init__(self, index: int, vertex_count: int) -> None:
        self.index = index
        self.vertex_count = vertex_count
        super().__init__(
            f"Vertex index {index!r} out of range for graph with "
            f"{vertex_count} vertices"
        )


class InvalidEdgeWeightError(GraphError, ValueError):
    """Raised when an edge weight is not an integer in [0, UNREACHABLE)."""

    def __init__(self, weight: object) -> None:
        self.weight = weight
        super().__init__(
            f"Edge weight must be an integer in [0, {UNREACHABLE}), got {weight!r}"
        )


def require_index(index: object, vertex_count: int) -> int:
    """Return *index* if it addresses one of *vertex_count* vertices."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise IndexOutOfRangeError(index, vertex_count)  # type: ignore[arg-type]
    if not 0 <= index < vertex_count:
        raise IndexOutOfRangeError(index, vertex_count)
    return index
