"""
astar.py — A* Search
=====================
Same loop as Dijkstra, but the priority is f = g + h, where g is the
accumulated path cost and h is the node's fixed heuristic value.  The
search stops the moment the graph's goal node is popped and finalised.

The heuristic must be admissible (never overestimate the remaining
cost) for the reported path to be shortest.  That is the caller's
obligation; it is not validated here.
"""

import logging
from typing import Dict, Generator, List, Set, Tuple

from graph import Graph, GraphConfigError
from algorithms.dijkstra import pending, pop_min
from algorithms.step import ProgramPoint, Step, TraceBuilder

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "g ← {start: 0}; pq ← [(start, h(start))]",    # 0
    "while pq is not empty:",                      # 1
    "    u ← pq.pop_min(); if u = goal: stop",     # 2
    "    for (v, w) in adj(u):",                   # 3
    "        if g[u] + w < g[v]: f ← g[v] + h(v)", # 4
]

PROGRAM_LINES: Dict[ProgramPoint, int] = {
    ProgramPoint.INITIALIZE: 0,
    ProgramPoint.VISIT:      2,
    ProgramPoint.RELAX:      4,
}


def check_inputs(graph: Graph) -> None:
    """Raise GraphConfigError if the graph can't drive an A* run."""
    if graph.goal is None:
        raise GraphConfigError(f"A* needs a goal node; graph {graph.name!r} has none")
    if not graph.has_heuristics:
        raise GraphConfigError(f"A* needs heuristic values; graph {graph.name!r} has none")


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def astar(graph: Graph) -> Generator[Step, None, None]:

    check_inputs(graph)
    logger.debug("A* on %r trusts the supplied heuristic to be admissible", graph.name)

    INF     = float("inf")
    tb      = TraceBuilder()
    source  = graph.start
    goal    = graph.goal
    h       = {node.id: node.heuristic for node in graph.nodes}

    g_score: Dict[int, float]        = {nid: INF for nid in graph.node_ids()}
    g_score[source] = 0
    pq:      List[Tuple[int, float]] = [(source, h[source])]
    closed:  Set[int]                = set()

    # --- init step ---
    yield tb.emit(
        ProgramPoint.INITIALIZE,
        frontier=pending(pq),
        visited=closed,
        message="Start A*",
        explanation=(
            f"Priority is distance so far plus a guess of what remains: "
            f"f = g + h. For '{graph.label(source)}', g = 0 and h = {h[source]}."
        ),
        distances=g_score,
    )

    # --- main loop ---
    while pq:
        node, f = pop_min(pq)
        if node in closed:
            continue

        closed.add(node)
        yield tb.emit(
            ProgramPoint.VISIT,
            frontier=pending(pq),
            visited=closed,
            current=node,
            message=f"Visit {graph.label(node)}",
            explanation=(
                f"'{graph.label(node)}' has the lowest f-cost in the queue: "
                f"g({g_score[node]}) + h({h[node]}) = {f}."
            ),
            distances=g_score,
        )

        if node == goal:
            return

        # -- relax neighbours --
        for nbr, weight in graph.neighbours(node):
            tentative_g = g_score[node] + weight
            if tentative_g >= g_score[nbr]:
                continue
            g_score[nbr] = tentative_g
            f_nbr = tentative_g + h[nbr]
            pq.append((nbr, f_nbr))
            yield tb.emit(
                ProgramPoint.RELAX,
                frontier=pending(pq),
                visited=closed,
                current=node,
                message=f"Update {graph.label(nbr)}",
                explanation=f"g({tentative_g}) + h({h[nbr]}) = {f_nbr}",
                distances=g_score,
            )
