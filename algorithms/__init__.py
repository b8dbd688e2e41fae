"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bfs": AlgoInfo(key, label, fn, pseudocode, program_lines, …),
        …
    }

AlgoInfo is a lightweight dataclass.  The engine and the HTTP layer both
consume it, so adding an algorithm is: write the generator, add one
entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from graph import Graph, network_graph, tree_graph

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.bfs      import bfs      as _bfs,      PSEUDOCODE as _bfs_pc, PROGRAM_LINES as _bfs_pl
from algorithms.dfs      import dfs      as _dfs,      PSEUDOCODE as _dfs_pc, PROGRAM_LINES as _dfs_pl
from algorithms.dijkstra import dijkstra as _dijkstra, PSEUDOCODE as _dij_pc, PROGRAM_LINES as _dij_pl
from algorithms.astar    import astar    as _astar,    PSEUDOCODE as _ast_pc, PROGRAM_LINES as _ast_pl
from algorithms.step     import ProgramPoint, Step, TraceBuilder


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                          # registry key, e.g. "bfs"
    label:            str                          # human label, e.g. "Breadth-First Search"
    fn:               Callable                     # the generator function
    pseudocode:       List[str]                    # lines for the side-panel
    program_lines:    Dict[ProgramPoint, int]      # phase → pseudocode line
    tags:             List[str] = field(default_factory=list)
    weighted:         bool      = False            # runs on the weighted network graph
    has_heuristic:    bool      = False            # needs h values and a goal
    complexity_time:  str       = ""
    complexity_space: str       = ""
    description:      str       = ""               # one-liner for the UI card
    concept:          str       = ""               # Learning Mode paragraph
    applications:     str       = ""

    def line_for(self, step: Step) -> int:
        """Pseudocode line to highlight for a step; -1 if the phase isn't listed."""
        return self.program_lines.get(step.program_point, -1)

    def default_graph(self) -> Graph:
        return network_graph() if self.weighted else tree_graph()

    def to_dict(self) -> dict:
        return {
            "key":              self.key,
            "label":            self.label,
            "pseudocode":       list(self.pseudocode),
            "program_lines":    {p.value: line for p, line in self.program_lines.items()},
            "tags":             list(self.tags),
            "weighted":         self.weighted,
            "has_heuristic":    self.has_heuristic,
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "description":      self.description,
            "concept":          self.concept,
            "applications":     self.applications,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", fn=_bfs,
        pseudocode=_bfs_pc, program_lines=_bfs_pl,
        tags=["unweighted", "shortest-path", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer by layer. Finds shortest path by hop count.",
        concept=(
            "BFS explores layer by layer, starting from the source. When it first "
            "reaches a node it has found the path with the fewest edges to it."
        ),
        applications="GPS navigation, friend suggestions, network broadcasting.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", fn=_dfs,
        pseudocode=_dfs_pc, program_lines=_dfs_pl,
        tags=["unweighted", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Dives deep before backtracking. Does NOT guarantee shortest path.",
        concept=(
            "DFS follows one branch until it hits a dead end, then backtracks to the "
            "most recent node that still has unexplored neighbours."
        ),
        applications="Maze and puzzle solving, topological sorting, cycle detection.",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", fn=_dijkstra,
        pseudocode=_dij_pc, program_lines=_dij_pl,
        tags=["weighted", "shortest-path"], weighted=True,
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Greedily expands the closest node. Optimal for non-negative weights.",
        concept=(
            "Dijkstra handles weighted edges. It always finalises the cheapest pending "
            "node next, which yields the shortest total path cost to every node."
        ),
        applications="Map routing, link-state network protocols (OSPF), logistics.",
    ),

    "astar": AlgoInfo(
        key="astar", label="A* Search", fn=_astar,
        pseudocode=_ast_pc, program_lines=_ast_pl,
        tags=["weighted", "shortest-path", "heuristic"], weighted=True,
        has_heuristic=True,
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Dijkstra + heuristic guidance. Optimal when h is admissible.",
        concept=(
            "A* is an informed search. It adds a heuristic guess of the remaining "
            "distance to the cost so far, so paths heading the wrong way are skipped."
        ),
        applications="Game pathfinding, robotics motion planning.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key (case-insensitive), or None."""
    return REGISTRY.get(key.lower())


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


def graph_for(key: str) -> Graph:
    """Built-in graph an algorithm runs on: the tree, or the network if weighted."""
    info = get_algorithm(key)
    if info is None:
        raise ValueError(f"Unknown algorithm: {key}")
    return info.default_graph()


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "ProgramPoint",
    "Step",
    "TraceBuilder",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
    "graph_for",
]
