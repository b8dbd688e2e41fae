"""
presets.py — Built-in Demo Graphs
=================================
The two fixed graphs the visualizer replays algorithms over.

  • tree     – 11-node binary tree a..k, unweighted (BFS / DFS)
  • network  – 6-node weighted network Start..Goal (Dijkstra / A*)

Coordinates are layout hints for the renderer.  The network heuristic
never exceeds the true remaining cost to Goal, so A* on it is optimal.
"""

from typing import Callable, Dict, List

from graph.edge import Edge
from graph.errors import GraphConfigError
from graph.graph import Graph
from graph.node import Node


def tree_graph() -> Graph:
    nodes = [
        Node(0,  "a", x=250, y=50),
        Node(1,  "b", x=140, y=120),
        Node(2,  "c", x=360, y=120),
        Node(3,  "d", x=80,  y=200),
        Node(4,  "e", x=200, y=200),
        Node(5,  "f", x=300, y=200),
        Node(6,  "g", x=420, y=200),
        Node(7,  "h", x=80,  y=280),
        Node(8,  "i", x=170, y=280),
        Node(9,  "j", x=230, y=280),
        Node(10, "k", x=300, y=280),
    ]
    edges = [
        Edge(0, 1), Edge(0, 2),
        Edge(1, 3), Edge(1, 4),
        Edge(2, 5), Edge(2, 6),
        Edge(3, 7), Edge(4, 8),
        Edge(4, 9), Edge(5, 10),
    ]
    return Graph(nodes, edges, name="tree")


def network_graph() -> Graph:
    # true remaining cost to Goal: Start 7, A 10, B 5, C 6, D 2
    nodes = [
        Node(0, "Start", h=6, x=60,  y=160),
        Node(1, "A",     h=8, x=180, y=70),
        Node(2, "B",     h=4, x=180, y=250),
        Node(3, "C",     h=5, x=320, y=70),
        Node(4, "D",     h=2, x=320, y=250),
        Node(5, "Goal",  h=0, x=440, y=160),
    ]
    edges = [
        Edge(0, 1, 4),  Edge(0, 2, 2),
        Edge(1, 2, 5),  Edge(1, 3, 10),
        Edge(2, 4, 3),  Edge(3, 4, 4),
        Edge(3, 5, 11), Edge(4, 5, 2),
        Edge(2, 3, 8),
    ]
    return Graph(nodes, edges, name="network", goal=5)


PRESETS: Dict[str, Callable[[], Graph]] = {
    "tree":    tree_graph,
    "network": network_graph,
}


def get_preset(name: str) -> Graph:
    """Build a fresh copy of a named preset graph."""
    factory = PRESETS.get(name)
    if factory is None:
        raise GraphConfigError(f"Unknown graph preset: {name}")
    return factory()


def list_presets() -> List[str]:
    return list(PRESETS)
