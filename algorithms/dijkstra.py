"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Generator-based Dijkstra over a plain list used as the priority
collection of (node_id, distance) pairs.

Yields a Step at:
  1. Initialise distances / seed the collection with the source
  2. Pop the minimum-distance node  →  finalise it, CURRENT
  3. Successful relaxation  →  update distance, insert a new entry

There is no decrease-key.  An improved distance is inserted as a new
entry and the outdated one stays behind; when a stale entry for an
already-finalised node is popped it is dropped without a Step.  Before
each pop the collection is re-sorted by distance with a stable sort, so
equal distances leave in insertion order.

Correctness note: Dijkstra requires non-negative weights.  This is a
caller obligation; negative weights are not checked.
"""

from typing import Dict, Generator, List, Set, Tuple

from graph import Graph
from algorithms.step import ProgramPoint, Step, TraceBuilder


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "dist ← {start: 0}; pq ← [(start, 0)]",        # 0
    "while pq is not empty:",                      # 1
    "    u ← pq.pop_min(); finalise u",            # 2
    "    for (v, w) in adj(u):",                   # 3
    "        if dist[u] + w < dist[v]: relax v",   # 4
]

PROGRAM_LINES: Dict[ProgramPoint, int] = {
    ProgramPoint.INITIALIZE: 0,
    ProgramPoint.VISIT:      2,
    ProgramPoint.RELAX:      4,
}


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dijkstra(graph: Graph) -> Generator[Step, None, None]:

    INF     = float("inf")
    tb      = TraceBuilder()
    source  = graph.start

    dist: Dict[int, float]           = {nid: INF for nid in graph.node_ids()}
    dist[source] = 0
    pq:   List[Tuple[int, float]]    = [(source, 0)]
    visited: Set[int]                = set()

    # --- init step ---
    yield tb.emit(
        ProgramPoint.INITIALIZE,
        frontier=pending(pq),
        visited=visited,
        message="Start Dijkstra",
        explanation=(
            f"All distances are ∞ except '{graph.label(source)}' = 0. Seed the "
            f"priority queue with it; we are looking for the cheapest total cost."
        ),
        distances=dist,
    )

    # --- main loop ---
    while pq:
        node, d = pop_min(pq)
        if node in visited:
            continue

        visited.add(node)
        yield tb.emit(
            ProgramPoint.VISIT,
            frontier=pending(pq),
            visited=visited,
            current=node,
            message=f"Visit {graph.label(node)} ({d})",
            explanation=(
                f"'{graph.label(node)}' has the lowest distance in the queue ({d}). "
                f"With non-negative weights no cheaper path can appear later, so "
                f"this distance is now FINAL."
            ),
            distances=dist,
        )

        # -- relax neighbours --
        for nbr, weight in graph.neighbours(node):
            new_dist = dist[node] + weight
            if new_dist >= dist[nbr]:
                continue
            dist[nbr] = new_dist
            pq.append((nbr, new_dist))
            yield tb.emit(
                ProgramPoint.RELAX,
                frontier=pending(pq),
                visited=visited,
                current=node,
                message=f"Relaxing {graph.label(nbr)}",
                explanation=(
                    f"Going through '{graph.label(node)}' costs {dist[node]} + {weight} = "
                    f"{new_dist}, cheaper than before. Updated cost of "
                    f"'{graph.label(nbr)}' to {new_dist}."
                ),
                distances=dist,
            )


# ---------------------------------------------------------------------------
# Priority collection helpers (shared with A*)
# ---------------------------------------------------------------------------
def pop_min(pq: List[Tuple[int, float]]) -> Tuple[int, float]:
    """Stable-sort by priority and remove the first entry."""
    pq.sort(key=lambda entry: entry[1])
    return pq.pop(0)


def pending(pq: List[Tuple[int, float]]) -> List[int]:
    return [node for node, _ in pq]
