"""Single-source shortest distances (Dijkstra) on non-negative weights.

Algorithm:
  1.  Every vertex other than the start begins with the weight of the
      direct edge start -> v, or "unknown" if there is no such edge.
  2.  Finalize the unfinalized vertex with the smallest known tentative
      distance.  Ties go to the lowest vertex index.
  3.  Relax each unfinalized neighbour of that vertex: if
      dist[u] + w(u, v) beats dist[v], take it.
  4.  Repeat until no unfinalized vertex has a known distance.  Anything
      still unknown is unreachable.

Selection uses a heap of (distance, index) pairs with lazy deletion:
a vertex may sit in the heap several times with older, larger
distances, and those stale entries are skipped when popped.  Since the
tuple compares distance first and index second, the first live entry
popped is exactly the minimum-distance, lowest-index candidate.

"Unknown" is None while the algorithm runs.  The UNREACHABLE sentinel
only appears in the mapping handed back to the caller, so no addition
ever touches it.

Weights are validated as non-negative integers when edges are added, so
the greedy finalization step is always sound here.
"""
from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from algograph.graph.errors import require_index
from algograph.graph.types import UNREACHABLE, UNSET, VertexIndex, Weight

if TYPE_CHECKING:
    from algograph.graph.adjacency import Graph

log = logging.getLogger(__name__)


@dataclass(slots=True)
class ShortestPathTree:
    """Distances and predecessors from one start vertex."""
    start: VertexIndex
    distances: list[Weight | None]     # None = unreachable
    predecessors: list[VertexIndex]    # UNSET when unreachable, start -> itself

    def distance_map(self) -> dict[VertexIndex, Weight]:
        """Every vertex except the start, with UNREACHABLE for no path."""
        return {
            v: (UNREACHABLE if d is None else d)
            for v, d in enumerate(self.distances)
            if v != self.start
        }

    def path_to(self, target: VertexIndex) -> list[VertexIndex] | None:
        if not self.distances:
            return None
        target = require_index(target, len(self.distances))
        if self.distances[target] is None:
            return None
        path = [target]
        cur = target
        while cur != self.start:
            cur = self.predecessors[cur]
            path.append(cur)
        path.reverse()
        return path


def shortest_path_tree(graph: Graph, start: VertexIndex) -> ShortestPathTree:
    """Run Dijkstra from *start*.

    An empty graph has nothing to measure and gives an empty tree.
    Otherwise raises IndexOutOfRangeError if *start* is not a vertex of
    *graph*.
    """
    if graph.vertex_count == 0:
        return ShortestPathTree(start=start, distances=[], predecessors=[])
    start = graph.require_index(start)
    vertices = graph.vertices
    n = len(vertices)

    dist: list[Weight | None] = [None] * n
    pred: list[VertexIndex] = [UNSET] * n
    finalized = [False] * n

    dist[start] = 0
    pred[start] = start
    finalized[start] = True

    heap: list[tuple[Weight, VertexIndex]] = []
    source = vertices[start]
    for v in range(n):
        if v == start:
            continue
        w = source.weight_to(v)
        if w is not None:
            dist[v] = w
            pred[v] = start
            heap.append((w, v))
    heapq.heapify(heap)

    settled = 1
    while heap:
        d, u = heapq.heappop(heap)
        if finalized[u] or d > dist[u]:  # type: ignore[operator]
            continue
        finalized[u] = True
        settled += 1
        for edge in vertices[u].adjacency:
            v = edge.destination
            if finalized[v]:
                continue
            candidate = d + edge.weight
            current = dist[v]
            if current is None or candidate < current:
                dist[v] = candidate
                pred[v] = u
                heapq.heappush(heap, (candidate, v))

    if settled < n:
        log.debug(
            "Dijkstra from %d: %d of %d vertices unreachable",
            start, n - settled, n,
        )
    return ShortestPathTree(start=start, distances=dist, predecessors=pred)


def shortest_distances(graph: Graph, start: VertexIndex) -> dict[VertexIndex, Weight]:
    """Map every vertex except *start* to its minimum path weight.

    Vertices with no path from *start* map to UNREACHABLE.  A single
    edge weight is always below UNREACHABLE, but a path whose summed
    weight reaches it is indistinguishable from "no path" here; use
    shortest_path_tree(), whose distances keep None for unreachable.
    """
    return shortest_path_tree(graph, start).distance_map()


def shortest_path(
    graph: Graph, start: VertexIndex, target: VertexIndex
) -> list[VertexIndex] | None:
    """One minimum-weight path start -> ... -> target, or None."""
    return shortest_path_tree(graph, start).path_to(target)
