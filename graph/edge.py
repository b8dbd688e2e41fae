"""
edge.py — Graph Edge
====================
An undirected connection between two node ids with an optional weight.

Design decisions:
  - `u` and `v` are node ids, NOT Node references.  This keeps edges
    serialisable and avoids circular references.
  - `weight` is None for unweighted graphs; `cost` reads that as 1 so
    BFS / DFS and the weighted algorithms share one adjacency view.
  - Edges are always undirected: the Graph adds both u→v and v→u.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Edge:
    """
    Attributes:
        u, v   : Endpoint node ids (order carries no meaning).
        weight : Optional non-negative cost.  None ⇒ unit cost.
    """

    u:      int
    v:      int
    weight: Optional[float] = None

    @property
    def cost(self) -> float:
        return self.weight if self.weight is not None else 1

    @property
    def key(self) -> Tuple[int, int]:
        """Order-independent identity, used to reject duplicate edges."""
        return (self.u, self.v) if self.u <= self.v else (self.v, self.u)

    def connects(self, node_a: int, node_b: int) -> bool:
        """True if this edge links node_a ↔ node_b."""
        return {self.u, self.v} == {node_a, node_b}

    def other_end(self, node_id: int) -> Optional[int]:
        """Given one endpoint, return the other. None if node_id isn't an endpoint."""
        if node_id == self.u:
            return self.v
        if node_id == self.v:
            return self.u
        return None

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        data = {"u": self.u, "v": self.v}
        if self.weight is not None:
            data["w"] = self.weight
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        return cls(u=int(data["u"]), v=int(data["v"]), weight=data.get("w"))

    def __repr__(self) -> str:
        w = "" if self.weight is None else f", w={self.weight}"
        return f"Edge({self.u} ↔ {self.v}{w})"
