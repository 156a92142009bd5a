"""Graph algorithms over fixed-size weighted adjacency lists."""

from algograph.graph.adjacency import AdjacencyListNode, Graph, Vertex
from algograph.graph.errors import (
    GraphError,
    IndexOutOfRangeError,
    InvalidEdgeWeightError,
)
from algograph.graph.dijkstra import (
    ShortestPathTree,
    shortest_distances,
    shortest_path,
    shortest_path_tree,
)
from algograph.graph.topological import (
    CyclicGraphError,
    TopologicalLabeling,
    topological_labeling,
)
from algograph.graph.traversal import (
    TraversalResult,
    breadth_first_search,
    depth_first_search,
)
from algograph.graph.types import DEFAULT_WEIGHT, UNREACHABLE, UNSET

__all__ = [
    "AdjacencyListNode",
    "CyclicGraphError",
    "DEFAULT_WEIGHT",
    "Graph",
    "GraphError",
    "IndexOutOfRangeError",
    "InvalidEdgeWeightError",
    "ShortestPathTree",
    "TopologicalLabeling",
    "TraversalResult",
    "UNREACHABLE",
    "UNSET",
    "Vertex",
    "breadth_first_search",
    "depth_first_search",
    "shortest_distances",
    "shortest_path",
    "shortest_path_tree",
    "topological_labeling",
]
