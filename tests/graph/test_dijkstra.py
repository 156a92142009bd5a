"""Tests for single-source shortest distances."""
from __future__ import annotations

import random

import pytest

from algograph.graph.adjacency import Graph
from algograph.graph.dijkstra import (
    shortest_distances,
    shortest_path,
    shortest_path_tree,
)
from algograph.graph.errors import IndexOutOfRangeError
from algograph.graph.types import UNREACHABLE

SEED = 42


def _bellman_ford(g: Graph, start: int) -> dict[int, int]:
    """Reference distances by plain edge relaxation, n - 1 rounds."""
    n = g.vertex_count
    dist: list[int | None] = [None] * n
    dist[start] = 0
    for _ in range(n - 1):
        changed = False
        for u, v, w in g.edges():
            if dist[u] is not None and (dist[v] is None or dist[u] + w < dist[v]):
                dist[v] = dist[u] + w
                changed = True
        if not changed:
            break
    return {
        v: (UNREACHABLE if d is None else d)
        for v, d in enumerate(dist)
        if v != start
    }


def _random_graph(n: int, edge_prob: float, seed: int) -> Graph:
    rng = random.Random(seed)
    g = Graph(n)
    for u in range(n):
        for v in range(n):
            if u != v and rng.random() < edge_prob:
                g.add_edge(u, v, rng.randint(0, 20))
    return g


class TestShortestDistances:
    def test_weighted_example(self, weighted_graph: Graph) -> None:
        assert shortest_distances(weighted_graph, 0) == {1: 1, 2: 3, 3: 4}

    def test_unreachable_gets_sentinel(self) -> None:
        g = Graph.from_edges(3, [(0, 1, 1)])
        assert shortest_distances(g, 0) == {1: 1, 2: UNREACHABLE}

    def test_start_excluded(self, weighted_graph: Graph) -> None:
        assert 0 not in shortest_distances(weighted_graph, 0)
        assert 2 not in shortest_distances(weighted_graph, 2)

    def test_from_sink_everything_unreachable(self, weighted_graph: Graph) -> None:
        assert shortest_distances(weighted_graph, 3) == {
            0: UNREACHABLE,
            1: UNREACHABLE,
            2: UNREACHABLE,
        }

    def test_single_vertex(self) -> None:
        assert shortest_distances(Graph(1), 0) == {}

    def test_indirect_beats_direct(self) -> None:
        # the first vertex in index order is not the closest one; an
        # array-order selection would finalize 1 at distance 10
        g = Graph.from_edges(3, [(0, 1, 10), (0, 2, 1), (2, 1, 1)])
        assert shortest_distances(g, 0) == {1: 2, 2: 1}

    def test_zero_weight_edges(self) -> None:
        g = Graph.from_edges(4, [(0, 1, 0), (1, 2, 0), (2, 3, 5), (0, 3, 6)])
        assert shortest_distances(g, 0) == {1: 0, 2: 0, 3: 5}

    def test_parallel_edges_use_lightest(self) -> None:
        g = Graph.from_edges(3, [(0, 1, 9), (0, 1, 2), (1, 2, 7), (1, 2, 1)])
        assert shortest_distances(g, 0) == {1: 2, 2: 3}

    def test_cycle_back_to_start_ignored(self) -> None:
        g = Graph.from_edges(3, [(0, 1, 1), (1, 0, 1), (1, 2, 1), (0, 0, 3)])
        assert shortest_distances(g, 0) == {1: 1, 2: 2}

    def test_undirected_edges(self) -> None:
        g = Graph(4)
        g.add_undirected_edge(0, 1, 4)
        g.add_undirected_edge(1, 2, 1)
        g.add_undirected_edge(2, 3, 1)
        g.add_undirected_edge(0, 3, 1)
        assert shortest_distances(g, 0) == {1: 3, 2: 2, 3: 1}
        assert shortest_distances(g, 2) == {0: 2, 1: 1, 3: 1}

    def test_large_weights_stay_exact(self) -> None:
        big = UNREACHABLE - 1
        g = Graph.from_edges(3, [(0, 1, big), (1, 2, big)])
        assert shortest_distances(g, 0) == {1: big, 2: 2 * big}

    @pytest.mark.parametrize("start", [-1, 4, 100])
    def test_bad_start_raises(self, weighted_graph: Graph, start: int) -> None:
        with pytest.raises(IndexOutOfRangeError):
            shortest_distances(weighted_graph, start)

    def test_empty_graph_gives_empty_result(self, empty_graph: Graph) -> None:
        assert shortest_distances(empty_graph, 0) == {}
        assert empty_graph.shortest_distances(0) == {}
        assert shortest_path(empty_graph, 0, 0) is None

    def test_path_sum_reaching_sentinel_kept_apart_in_tree(self) -> None:
        half = UNREACHABLE // 2 + 1
        g = Graph.from_edges(4, [(0, 1, half), (1, 2, half)])
        tree = shortest_path_tree(g, 0)
        assert tree.distances == [0, half, 2 * half, None]
        assert tree.path_to(2) == [0, 1, 2]
        assert tree.path_to(3) is None

    @pytest.mark.parametrize("seed", range(5))
    def test_matches_reference_on_random_graphs(self, seed: int) -> None:
        g = _random_graph(25, 0.12, SEED + seed)
        for start in (0, 7, 24):
            assert shortest_distances(g, start) == _bellman_ford(g, start)

    def test_graph_method_delegates(self, weighted_graph: Graph) -> None:
        assert weighted_graph.shortest_distances(0) == {1: 1, 2: 3, 3: 4}

    def test_does_not_touch_vertices(self, weighted_graph: Graph) -> None:
        before = [(v.visited, v.predecessor, v.count, v.label) for v in weighted_graph]
        weighted_graph.shortest_distances(1)
        after = [(v.visited, v.predecessor, v.count, v.label) for v in weighted_graph]
        assert before == after


class TestShortestPath:
    def test_path_through_cheaper_route(self, weighted_graph: Graph) -> None:
        assert shortest_path(weighted_graph, 0, 3) == [0, 1, 2, 3]

    def test_path_to_self(self, weighted_graph: Graph) -> None:
        assert shortest_path(weighted_graph, 2, 2) == [2]

    def test_unreachable_is_none(self, weighted_graph: Graph) -> None:
        assert weighted_graph.shortest_path(3, 0) is None

    def test_bad_target_raises(self, weighted_graph: Graph) -> None:
        with pytest.raises(IndexOutOfRangeError):
            shortest_path(weighted_graph, 0, 9)

    def test_tree_paths_sum_to_distances(self) -> None:
        g = _random_graph(30, 0.1, SEED)
        tree = shortest_path_tree(g, 0)
        for target, dist in tree.distance_map().items():
            path = tree.path_to(target)
            if dist == UNREACHABLE:
                assert path is None
                continue
            assert path is not None
            assert path[0] == 0 and path[-1] == target
            total = sum(
                g.edge_weight(u, v)  # type: ignore[misc]
                for u, v in zip(path, path[1:])
            )
            assert total == dist
