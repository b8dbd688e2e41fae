"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS.  Yields a Step at every observable event:
  1. Initialise  →  source queued and marked visited
  2. Dequeue a node  →  it becomes CURRENT
  3. Discover an unseen neighbour  →  mark visited, enqueue

Neighbours arrive from the graph in ascending id order, so the visit
order is the order nodes were first enqueued.
"""

from collections import deque
from typing import Dict, Generator, List

from graph import Graph
from algorithms.step import ProgramPoint, Step, TraceBuilder


# ---------------------------------------------------------------------------
# Pseudocode: each string is one displayed line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "queue ← [start]; visited ← {start}",      # 0
    "while queue is not empty:",               # 1
    "    u ← queue.dequeue()",                 # 2
    "    for v in adj(u) not visited:",        # 3
    "        visited.add(v); queue.enqueue(v)",# 4
]

PROGRAM_LINES: Dict[ProgramPoint, int] = {
    ProgramPoint.INITIALIZE: 0,
    ProgramPoint.VISIT:      2,
    ProgramPoint.DISCOVER:   4,
}


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bfs(graph: Graph) -> Generator[Step, None, None]:
    """
    Yields Step snapshots for every event during BFS from `graph.start`.
    """

    tb      = TraceBuilder()
    source  = graph.start
    queue   = deque([source])
    visited = {source}

    # --- initialisation step ---
    yield tb.emit(
        ProgramPoint.INITIALIZE,
        frontier=queue,
        visited=visited,
        message="Initialize search",
        explanation=(
            f"Start at '{graph.label(source)}': it is placed into the queue and "
            f"marked visited. BFS explores layer by layer from here."
        ),
    )

    # --- main loop ---
    while queue:
        node = queue.popleft()
        yield tb.emit(
            ProgramPoint.VISIT,
            frontier=queue,
            visited=visited,
            current=node,
            message=f"Visiting {graph.label(node)}",
            explanation=(
                f"Dequeue '{graph.label(node)}' from the front. BFS always expands "
                f"the node that was discovered earliest (FIFO)."
            ),
        )

        for nbr, _ in graph.neighbours(node):
            if nbr in visited:
                continue
            visited.add(nbr)
            queue.append(nbr)
            yield tb.emit(
                ProgramPoint.DISCOVER,
                frontier=queue,
                visited=visited,
                current=node,
                message=f"Found {graph.label(nbr)}",
                explanation=(
                    f"'{graph.label(nbr)}' is new: mark it visited and add it to the "
                    f"back of the queue. It waits until every node at the current "
                    f"depth has been expanded."
                ),
            )
