"""
graph.py — Graph Container
==========================
Single source of truth for the graph.  Algorithms read it; nothing
writes to it after construction.

Responsibilities:
  1. Validation                             (dense ids, known endpoints, …)
  2. Adjacency queries                      (neighbours, edge lookup, …)
  3. Serialisation round-trip               (to_dict / from_dict)

Design decisions:
  - Nodes are stored in a tuple indexed by id; ids are a dense 0-based range.
  - The adjacency dict `_adj[node_id] → [(neighbour_id, cost)]` is built
    once, symmetric (every edge contributes u→v and v→u), and each list is
    ordered by ascending neighbour id.  That ordering IS the tie-break rule
    every algorithm relies on, so it lives here and nowhere else.
  - `start` and `goal` are graph attributes.  A* reads `goal` instead of
    assuming a fixed node id.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from graph.edge import Edge
from graph.errors import GraphConfigError
from graph.node import Node

logger = logging.getLogger(__name__)


class Graph:
    """
    Attributes:
        name   : Short identifier, e.g. "tree" or "network".
        nodes  : Tuple of Node, position == node id.
        edges  : Tuple of Edge in declaration order.
        start  : Source node id every algorithm starts from.
        goal   : Optional goal node id (required by A*).
        _adj   : {node_id: [(neighbour_id, cost), …]} ascending by neighbour.
    """

    def __init__(
        self,
        nodes: Iterable[Node],
        edges: Iterable[Edge],
        name: str = "",
        start: int = 0,
        goal: Optional[int] = None,
    ):
        self.name:  str               = name
        self.nodes: Tuple[Node, ...]  = tuple(nodes)
        self.edges: Tuple[Edge, ...]  = tuple(edges)
        self.start: int               = start
        self.goal:  Optional[int]     = goal

        self._validate()
        self._adj: Dict[int, List[Tuple[int, float]]] = self._build_adjacency()

    # ==================================================================
    # VALIDATION
    # ==================================================================
    def _validate(self) -> None:
        if not self.nodes:
            self._fail("graph has no nodes")

        for index, node in enumerate(self.nodes):
            if node.id != index:
                self._fail(f"node ids must be a dense 0-based range, got id {node.id} at position {index}")
            if node.h is not None and node.h < 0:
                self._fail(f"node {node.id} has a negative heuristic ({node.h})")

        seen = set()
        for edge in self.edges:
            for end in (edge.u, edge.v):
                if not self.has_node(end):
                    self._fail(f"edge {edge.u}-{edge.v} references unknown node id {end}")
            if edge.u == edge.v:
                self._fail(f"self-loop on node {edge.u}")
            if edge.key in seen:
                self._fail(f"duplicate edge between {edge.u} and {edge.v}")
            seen.add(edge.key)

        if not self.has_node(self.start):
            self._fail(f"start node id {self.start} does not exist")
        if self.goal is not None and not self.has_node(self.goal):
            self._fail(f"goal node id {self.goal} does not exist")

    def _fail(self, reason: str) -> None:
        logger.warning("Rejected graph %r: %s", self.name, reason)
        raise GraphConfigError(reason)

    def _build_adjacency(self) -> Dict[int, List[Tuple[int, float]]]:
        adj: Dict[int, List[Tuple[int, float]]] = {node.id: [] for node in self.nodes}
        for edge in self.edges:
            adj[edge.u].append((edge.v, edge.cost))
            adj[edge.v].append((edge.u, edge.cost))
        for entries in adj.values():
            entries.sort(key=lambda entry: entry[0])
        return adj

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: int) -> List[Tuple[int, float]]:
        """Return [(neighbour_id, cost)] in ascending neighbour-id order."""
        return list(self._adj.get(node_id, []))

    def has_node(self, node_id: int) -> bool:
        return 0 <= node_id < len(self.nodes)

    def get_node(self, node_id: int) -> Optional[Node]:
        return self.nodes[node_id] if self.has_node(node_id) else None

    def label(self, node_id: int) -> str:
        node = self.get_node(node_id)
        return node.label if node else str(node_id)

    def get_edge_between(self, a: int, b: int) -> Optional[Edge]:
        for edge in self.edges:
            if edge.connects(a, b):
                return edge
        return None

    def degree(self, node_id: int) -> int:
        return len(self._adj.get(node_id, []))

    @property
    def has_heuristics(self) -> bool:
        """True if at least one node carries an `h` value."""
        return any(node.h is not None for node in self.nodes)

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "name":  self.name,
            "start": self.start,
            "goal":  self.goal,
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        return cls(
            nodes=[Node.from_dict(nd) for nd in data.get("nodes", [])],
            edges=[Edge.from_dict(ed) for ed in data.get("edges", [])],
            name=data.get("name", ""),
            start=data.get("start", 0),
            goal=data.get("goal"),
        )

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def has_negative_edges(self) -> bool:
        return any(e.weight is not None and e.weight < 0 for e in self.edges)

    def node_ids(self) -> List[int]:
        return [node.id for node in self.nodes]

    def __repr__(self) -> str:
        return f"Graph(name={self.name!r}, nodes={self.node_count()}, edges={self.edge_count()}, goal={self.goal})"
