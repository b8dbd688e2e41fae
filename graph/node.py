"""
node.py — Graph Node
====================
Immutable identity for one vertex of a fixed demo graph.

Design decisions:
  - Nodes are frozen: the graph is built once and never mutated while
    a trace is generated from it.  Per-run data (visited, distances,
    frontier membership) lives in the Step snapshots, not on the node.
  - `h` is the A* heuristic estimate to the graph's goal.  None means
    "not supplied"; `heuristic` reads it as 0 so unweighted algorithms
    never have to care.
  - `x` / `y` are layout hints for an external renderer only.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Node:
    """
    Attributes:
        id    : Dense 0-based integer identifier.
        label : Human-readable name shown by the renderer and in messages.
        h     : Optional non-negative heuristic estimate to the goal node.
        x, y  : Canvas coordinates (renderer hint, ignored by the core).
    """

    id:    int
    label: str
    h:     Optional[float] = None
    x:     float           = 0.0
    y:     float           = 0.0

    @property
    def heuristic(self) -> float:
        return self.h if self.h is not None else 0.0

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        data = {"id": self.id, "label": self.label, "x": self.x, "y": self.y}
        if self.h is not None:
            data["h"] = self.h
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        return cls(
            id=int(data["id"]),
            label=data.get("label") or str(data["id"]),
            h=data.get("h"),
            x=data.get("x", 0.0),
            y=data.get("y", 0.0),
        )

    def __repr__(self) -> str:
        h = "" if self.h is None else f", h={self.h}"
        return f"Node(id={self.id}, label={self.label}{h})"
