"""Depth-first and breadth-first traversal over every vertex.

Both traversals cover the whole graph: they walk vertices in index
order and start a new tree from every vertex that an earlier tree did
not reach.  The result is a spanning forest described by a predecessor
list, where a root is its own predecessor.

Neither function writes to the graph.  The visited flags and
predecessors live in per-call lists that come back in a
TraversalResult, so two traversals of the same graph cannot trample
each other.

DFS uses an explicit stack of (vertex, adjacency iterator) pairs
instead of recursion.  A 100k-vertex path would blow straight through
the interpreter's recursion limit otherwise.  Because each stack frame
resumes its own iterator, the visit order is identical to the
recursive version: first unvisited neighbour in adjacency order wins.
"""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

from algograph.graph.errors import require_index
from algograph.graph.types import UNSET, VertexIndex

if TYPE_CHECKING:
    from algograph.graph.adjacency import AdjacencyListNode, Graph

log = logging.getLogger(__name__)


@dataclass(slots=True)
class TraversalResult:
    """Spanning forest produced by one traversal."""
    order: list[VertexIndex]          # vertices in the order they were discovered
    visited: list[bool]
    predecessors: list[VertexIndex]   # root -> itself

    @property
    def roots(self) -> list[VertexIndex]:
        return [v for v in self.order if self.predecessors[v] == v]

    def path_to(self, index: VertexIndex) -> list[VertexIndex]:
        """Tree path from the root of *index*'s tree down to *index*."""
        index = require_index(index, len(self.predecessors))
        path = [index]
        cur = index
        while self.predecessors[cur] != cur:
            cur = self.predecessors[cur]
            path.append(cur)
        path.reverse()
        return path

    def hops(self, index: VertexIndex) -> int:
        """Number of tree edges between *index* and its root."""
        return len(self.path_to(index)) - 1


def depth_first_search(graph: Graph) -> TraversalResult:
    """Visit every vertex depth-first, restarting from each unvisited one."""
    vertices = graph.vertices
    n = len(vertices)
    visited = [False] * n
    preds = [UNSET] * n
    order: list[VertexIndex] = []

    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        preds[root] = root
        order.append(root)
        stack: list[tuple[VertexIndex, Iterator[AdjacencyListNode]]] = [
            (root, iter(vertices[root].adjacency))
        ]
        while stack:
            node, edges = stack[-1]
            for edge in edges:
                nxt = edge.destination
                if not visited[nxt]:
                    visited[nxt] = True
                    preds[nxt] = node
                    order.append(nxt)
                    stack.append((nxt, iter(vertices[nxt].adjacency)))
                    break
            else:
                # adjacency exhausted
                stack.pop()

    result = TraversalResult(order=order, visited=visited, predecessors=preds)
    if log.isEnabledFor(logging.DEBUG):
        log.debug("DFS visited %d vertices in %d tree(s)", n, len(result.roots))
    return result


def breadth_first_search(graph: Graph) -> TraversalResult:
    """Visit every vertex level by level, restarting from each unvisited one.

    A vertex is marked visited when it is enqueued, not when it is
    dequeued, so nothing enters the queue twice.
    """
    vertices = graph.vertices
    n = len(vertices)
    visited = [False] * n
    preds = [UNSET] * n
    order: list[VertexIndex] = []

    q: deque[VertexIndex] = deque()
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        preds[root] = root
        order.append(root)
        q.append(root)
        while q:
            node = q.popleft()
            for edge in vertices[node].adjacency:
                nxt = edge.destination
                if not visited[nxt]:
                    visited[nxt] = True
                    preds[nxt] = node
                    order.append(nxt)
                    q.append(nxt)

    result = TraversalResult(order=order, visited=visited, predecessors=preds)
    if log.isEnabledFor(logging.DEBUG):
        log.debug("BFS visited %d vertices in %d tree(s)", n, len(result.roots))
    return result
