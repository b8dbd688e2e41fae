"""
Pytest configuration and shared fixtures.
"""

import random
from typing import Dict, List

import pytest

from graph import Edge, Graph, Node, network_graph, tree_graph
from engine import ManualScheduler, generate


@pytest.fixture
def tree() -> Graph:
    return tree_graph()


@pytest.fixture
def network() -> Graph:
    return network_graph()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def bfs_trace(tree):
    return generate(tree, "bfs")


# ---------------------------------------------------------------------------
# Helpers for property-style checks
# ---------------------------------------------------------------------------
def random_graph(seed: int, n: int = 8, p: float = 0.35) -> Graph:
    """Random weighted graph; node n-1 is the goal, and may be unreachable."""
    rng = random.Random(seed)
    edges = [
        Edge(u, v, rng.randint(1, 9))
        for u in range(n)
        for v in range(u + 1, n)
        if rng.random() < p
    ]
    nodes = [Node(i, f"n{i}") for i in range(n)]
    return Graph(nodes, edges, name=f"random-{seed}", goal=n - 1)


def all_pairs(graph: Graph, unit: bool = False) -> List[List[float]]:
    """Floyd–Warshall reference distances."""
    INF = float("inf")
    n = graph.node_count()
    dist = [[0 if i == j else INF for j in range(n)] for i in range(n)]
    for e in graph.edges:
        cost = 1 if unit else e.cost
        dist[e.u][e.v] = dist[e.v][e.u] = min(dist[e.u][e.v], cost)
    for k in range(n):
        for i in range(n):
            for j in range(n):
                if dist[i][k] + dist[k][j] < dist[i][j]:
                    dist[i][j] = dist[i][k] + dist[k][j]
    return dist


def with_exact_heuristic(graph: Graph) -> Graph:
    """Copy of `graph` whose h is the true remaining cost to the goal (admissible)."""
    to_goal = all_pairs(graph)[graph.goal]
    nodes = [
        Node(node.id, node.label, h=to_goal[node.id] if to_goal[node.id] != float("inf") else 0)
        for node in graph.nodes
    ]
    return Graph(nodes, graph.edges, name=graph.name, goal=graph.goal)


def reachable(graph: Graph) -> Dict[int, float]:
    row = all_pairs(graph)[graph.start]
    return {node: d for node, d in enumerate(row) if d != float("inf")}
