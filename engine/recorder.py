"""
recorder.py — Trace Generation & Run Analytics
================================================
Runs an algorithm generator to completion and freezes the result into a
Trace, then computes the metrics the Analytics panel and Comparison
Mode need.

Usage:
    trace   = generate(graph, "dijkstra")   # all-or-nothing
    metrics = summarize(trace, graph)       # the analytics card
    trace.to_dict()                         # serialisable snapshot

Comparison Mode:
    Generate two traces on the SAME graph and call
    compare(summarize(t1, g), summarize(t2, g)) → ComparisonResult.

generate() is a pure function of (graph, algorithm): identical inputs
give identical traces, down to the serialised bytes.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from graph import Graph
from algorithms import get_algorithm
from algorithms.step import ProgramPoint, Step

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Trace: the immutable unit the playback controller replays
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Trace:
    algorithm:  str
    graph_name: str
    steps:      Tuple[Step, ...]

    def __len__(self) -> int:
        return len(self.steps)

    def __getitem__(self, index: int) -> Step:
        return self.steps[index]

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    @property
    def final_step(self) -> Optional[Step]:
        return self.steps[-1] if self.steps else None

    def visit_order(self) -> List[int]:
        """Node ids in the order they were visited / finalised."""
        return [s.current for s in self.steps if s.program_point is ProgramPoint.VISIT]

    def to_dict(self) -> dict:
        return {
            "algorithm":  self.algorithm,
            "graph":      self.graph_name,
            "steps":      [s.to_dict() for s in self.steps],
        }


def generate(graph: Graph, algorithm: str) -> Trace:
    """
    Produce the full Step sequence for one (graph, algorithm) pair.

    Raises:
        ValueError       : unknown algorithm key.
        GraphConfigError : the graph can't drive this algorithm.  Raised
                           before any Trace exists; nothing is partial.
    """
    info = get_algorithm(algorithm)
    if info is None:
        raise ValueError(f"Unknown algorithm: {algorithm}")

    steps = tuple(info.fn(graph))
    logger.debug("Generated %d steps for %s on %r", len(steps), info.key, graph.name)
    return Trace(algorithm=info.key, graph_name=graph.name, steps=steps)


# ---------------------------------------------------------------------------
# Metrics dataclass: what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:       str                = ""
    algo_label:     str                = ""
    graph_name:     str                = ""
    total_steps:    int                = 0
    nodes_visited:  int                = 0          # visited / finalised at the end
    visit_order:    List[int]          = field(default_factory=list)
    distances:      Dict[int, float]   = field(default_factory=dict)
    goal_distance:  Optional[float]    = None       # weighted runs with a goal only

    def to_dict(self) -> dict:
        return {
            "algo_key":      self.algo_key,
            "algo_label":    self.algo_label,
            "graph":         self.graph_name,
            "total_steps":   self.total_steps,
            "nodes_visited": self.nodes_visited,
            "visit_order":   list(self.visit_order),
            "distances":     {str(k): v for k, v in sorted(self.distances.items())},
            "goal_distance": self.goal_distance,
        }


@dataclass
class ComparisonResult:
    left:          RunMetrics = field(default_factory=RunMetrics)
    right:         RunMetrics = field(default_factory=RunMetrics)
    winner_nodes:  str        = ""      # which run visited fewer nodes
    same_distance: bool       = False   # both reached the goal at equal cost

    def to_dict(self) -> dict:
        return {
            "left":          self.left.to_dict(),
            "right":         self.right.to_dict(),
            "winner_nodes":  self.winner_nodes,
            "same_distance": self.same_distance,
        }


def summarize(trace: Trace, graph: Graph) -> RunMetrics:
    info = get_algorithm(trace.algorithm)
    last = trace.final_step
    distances = dict(last.distances) if last else {}

    goal_distance = None
    if graph.goal is not None and graph.goal in distances:
        goal_distance = distances[graph.goal]

    return RunMetrics(
        algo_key=trace.algorithm,
        algo_label=info.label if info else "",
        graph_name=trace.graph_name,
        total_steps=len(trace),
        nodes_visited=len(last.visited) if last else 0,
        visit_order=trace.visit_order(),
        distances=distances,
        goal_distance=goal_distance,
    )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: RunMetrics, right: RunMetrics) -> ComparisonResult:
    """Side-by-side analytics of two runs on the same graph."""

    def winner(l_val, r_val, l_key, r_key):
        if l_val == r_val:
            return "tie"
        return l_key if l_val < r_val else r_key

    return ComparisonResult(
        left=left,
        right=right,
        winner_nodes=winner(left.nodes_visited, right.nodes_visited, left.algo_label, right.algo_label),
        same_distance=(
            left.goal_distance is not None and left.goal_distance == right.goal_distance
        ),
    )
