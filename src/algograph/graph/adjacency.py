"""Fixed-size weighted directed graph stored as adjacency lists.

A Graph is created for a known vertex count n.  Vertices 0..n-1 exist
immediately with empty adjacency lists and the graph is never resized.
Each Vertex keeps its outgoing edges in insertion order (that order is
the traversal order) plus a static in-degree that edge population keeps
up to date, so topological labeling never has to scan for it.

The algorithms themselves live in traversal.py, dijkstra.py and
topological.py and never write to the graph.  The Graph methods with
the same names run them and then copy the finished result onto the
vertex fields (visited, predecessor, count, label) in one step.  Those
fields only describe the most recent call of the matching algorithm.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from algograph.graph import dijkstra, topological, traversal
from algograph.graph.errors import InvalidEdgeWeightError, require_index
from algograph.graph.types import DEFAULT_WEIGHT, UNREACHABLE, UNSET, VertexIndex, Weight


@dataclass(frozen=True, slots=True)
class AdjacencyListNode:
    """One outgoing edge: where it goes and what it costs."""
    destination: VertexIndex
    weight: Weight = DEFAULT_WEIGHT


@dataclass(slots=True)
class Vertex:
    """A graph vertex with its outgoing edges and traversal fields."""
    index: VertexIndex
    adjacency: list[AdjacencyListNode] = field(default_factory=list)
    degree: int = 0           # static in-degree
    visited: bool = False
    predecessor: int = UNSET
    count: int = 0            # working in-degree, topological labeling only
    label: int = UNSET

    def has_edge_to(self, index: VertexIndex) -> bool:
        """True if any outgoing edge leads to *index*."""
        return any(node.destination == index for node in self.adjacency)

    def weight_to(self, index: VertexIndex) -> Weight | None:
        """Weight of the edge to *index*, or None if there is none.

        Linear scan of the adjacency list.  With parallel edges the
        lightest one wins.
        """
        best: int | None = None
        for node in self.adjacency:
            if node.destination == index and (best is None or node.weight < best):
                best = node.weight
        return best

    @property
    def out_degree(self) -> int:
        """Number of outgoing edges, parallel edges counted separately."""
        return len(self.adjacency)


def _validate_weight(weight: object) -> int:
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise InvalidEdgeWeightError(weight)
    if not 0 <= weight < UNREACHABLE:
        raise InvalidEdgeWeightError(weight)
    return weight


class Graph:
    """Directed weighted graph over the vertex indices 0..n-1.

    Usage:
        g = Graph(4)
        g.add_edge(0, 1, 1)
        g.add_edge(0, 2, 4)
        g.add_edge(1, 2, 2)
        g.add_edge(2, 3, 1)
        g.shortest_distances(0)   # {1: 1, 2: 3, 3: 4}
    """

    __slots__ = ("_vertices",)

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError(f"Vertex count must be >= 0, got {vertex_count}")
        self._vertices: list[Vertex] = [Vertex(i) for i in range(vertex_count)]

    @classmethod
    def from_edges(
        cls,
        vertex_count: int,
        edges: Iterable[tuple[int, int] | tuple[int, int, int]],
    ) -> Graph:
        """Build a graph from (src, dst) or (src, dst, weight) tuples."""
        g = cls(vertex_count)
        for edge in edges:
            g.add_edge(*edge)
        return g

    # ---- population ------------------------------------------------------

    def add_edge(self, src: int, dst: int, weight: int = DEFAULT_WEIGHT) -> None:
        """Add a directed edge src -> dst.

        Raises IndexOutOfRangeError for a bad endpoint and
        InvalidEdgeWeightError for a weight outside [0, UNREACHABLE).
        Parallel edges and self loops are accepted.
        """
        self.require_index(src)
        self.require_index(dst)
        weight = _validate_weight(weight)
        self._vertices[src].adjacency.append(AdjacencyListNode(dst, weight))
        self._vertices[dst].degree += 1

    def add_undirected_edge(self, a: int, b: int, weight: int = DEFAULT_WEIGHT) -> None:
        """Add the two reciprocal entries a -> b and b -> a."""
        self.require_index(a)
        self.require_index(b)
        _validate_weight(weight)
        self.add_edge(a, b, weight)
        self.add_edge(b, a, weight)

    # ---- queries ---------------------------------------------------------

    def require_index(self, index: int) -> int:
        """Return *index* unchanged, or raise IndexOutOfRangeError."""
        return require_index(index, len(self._vertices))

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def vertices(self) -> tuple[Vertex, ...]:
        return tuple(self._vertices)

    def vertex(self, index: int) -> Vertex:
        return self._vertices[self.require_index(index)]

    def edge_weight(self, src: VertexIndex, dst: VertexIndex) -> Weight | None:
        """Weight of the edge src -> dst, or None when there is no edge."""
        return self.vertex(src).weight_to(self.require_index(dst))

    def edges(self) -> Iterator[tuple[int, int, int]]:
        for v in self._vertices:
            for node in v.adjacency:
                yield v.index, node.destination, node.weight

    @property
    def edge_count(self) -> int:
        return sum(len(v.adjacency) for v in self._vertices)

    # ---- algorithms ------------------------------------------------------

    def depth_first_search(self) -> traversal.TraversalResult:
        result = traversal.depth_first_search(self)
        self._apply_traversal(result)
        return result

    def breadth_first_search(self) -> traversal.TraversalResult:
        result = traversal.breadth_first_search(self)
        self._apply_traversal(result)
        return result

    def shortest_distances(self, start: int) -> dict[int, int]:
        """Minimum path weight from *start* to every other vertex.

        Vertices with no path map to UNREACHABLE (sys.maxsize).
        """
        return dijkstra.shortest_distances(self, start)

    def shortest_path(self, start: int, target: int) -> list[int] | None:
        return dijkstra.shortest_path(self, start, target)

    def topological_ordering(self) -> topological.TopologicalLabeling:
        """Label vertices 1..n in dependency order (Kahn's algorithm).

        Vertices on or downstream of a cycle keep label -1.
        """
        result = topological.topological_labeling(self)
        for v in self._vertices:
            v.count = result.counts[v.index]
            v.label = result.labels[v.index]
        return result

    def _apply_traversal(self, result: traversal.TraversalResult) -> None:
        for v in self._vertices:
            v.visited = result.visited[v.index]
            v.predecessor = result.predecessors[v.index]

    # ---- dunder ----------------------------------------------------------

    def __len__(self) -> int:
        return self.vertex_count

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count}, edges={self.edge_count})"
