"""Shared fixtures for graph tests."""
from __future__ import annotations

import pytest

from algograph.graph.adjacency import Graph


@pytest.fixture
def empty_graph() -> Graph:
    return Graph(0)


@pytest.fixture
def weighted_graph() -> Graph:
    """
    0 -1-> 1 -2-> 2 -1-> 3
    0 ------4---> 2
    """
    return Graph.from_edges(4, [(0, 1, 1), (0, 2, 4), (1, 2, 2), (2, 3, 1)])


@pytest.fixture
def unweighted_graph() -> Graph:
    """0 -> 1, 0 -> 2, 1 -> 2, 2 -> 3"""
    return Graph.from_edges(4, [(0, 1), (0, 2), (1, 2), (2, 3)])


@pytest.fixture
def diamond_graph() -> Graph:
    """
    0 -> 1 -> 3
    0 -> 2 -> 3
    """
    return Graph.from_edges(4, [(0, 1), (0, 2), (1, 3), (2, 3)])


@pytest.fixture
def disconnected_graph() -> Graph:
    """Two components {0, 1, 2} and {3, 4}, plus isolated vertex 5."""
    return Graph.from_edges(6, [(0, 1), (1, 2), (3, 4)])
