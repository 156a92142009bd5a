"""Topological labeling via Kahn's algorithm (in-degree counting).

The algorithm:
  1.  Copy every vertex's static in-degree into a working count and set
      every label to -1.
  2.  Seed a min-heap with all vertices whose count is 0.
  3.  Pop the smallest index, give it the next label (1, 2, ...), and
      decrement the count of each adjacency neighbour.  A neighbour whose
      count drops to exactly 0 enters the heap.
  4.  Stop when the heap is empty.

The heap is keyed by ascending vertex index, so among all vertices that
are ready at the same moment the lowest index is labeled first and the
output is fully determined by the graph.

A cycle is not an error.  No vertex on a cycle ever reaches count 0,
and neither does anything downstream of one, so those vertices keep
label -1 and the result is a partial labeling.  Callers that need a
total order can call require_complete().
"""
from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from algograph.graph.errors import GraphError
from algograph.graph.types import UNSET, VertexIndex

if TYPE_CHECKING:
    from algograph.graph.adjacency import Graph

log = logging.getLogger(__name__)


class CyclicGraphError(GraphError):
    """Raised by require_complete() when some vertices were never labeled."""

    def __init__(self, unlabeled: list[VertexIndex]) -> None:
        self.unlabeled = unlabeled
        super().__init__(
            f"Cycle detected: {len(unlabeled)} vertex(es) on or downstream "
            f"of a cycle"
        )


@dataclass(slots=True)
class TopologicalLabeling:
    """Labels 1..n in dependency order, -1 for vertices never freed."""
    order: list[VertexIndex]   # labeled vertices, label 1 first
    labels: list[int]
    counts: list[int]          # remaining in-degree after the run

    @property
    def unlabeled(self) -> list[VertexIndex]:
        return [v for v, label in enumerate(self.labels) if label == UNSET]

    @property
    def is_complete(self) -> bool:
        return len(self.order) == len(self.labels)

    def require_complete(self) -> list[VertexIndex]:
        """Return the full order, or raise CyclicGraphError."""
        if not self.is_complete:
            raise CyclicGraphError(self.unlabeled)
        return list(self.order)


def topological_labeling(graph: Graph) -> TopologicalLabeling:
    """Assign topological ranks without touching the graph's vertices."""
    vertices = graph.vertices
    counts = [v.degree for v in vertices]
    labels = [UNSET] * len(vertices)

    ready: list[VertexIndex] = [v.index for v in vertices if counts[v.index] == 0]
    heapq.heapify(ready)

    order: list[VertexIndex] = []
    next_label = 1
    while ready:
        idx = heapq.heappop(ready)
        labels[idx] = next_label
        order.append(idx)
        next_label += 1
        for edge in vertices[idx].adjacency:
            succ = edge.destination
            counts[succ] -= 1
            if counts[succ] == 0:
                heapq.heappush(ready, succ)

    result = TopologicalLabeling(order=order, labels=labels, counts=counts)
    if not result.is_complete:
        log.info(
            "Partial topological labeling: %d of %d vertices unlabeled",
            len(labels) - len(order), len(labels),
        )
    return result
