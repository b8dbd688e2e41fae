"""
dfs.py — Depth-First Search
=============================
Recursive DFS.  The explicit `stack` list mirrors the recursion so the
UI can render the "recursion stack" panel at every step.

Yields a Step at:
  1. Initialise  →  stack holds only the start node
  2. Enter a node  →  mark VISITED, it becomes CURRENT
  3. Return from a child  →  BACKTRACK to the parent

A neighbour is checked against `visited` right before descending into
it, so a node reached through a deeper branch is never entered twice.
The demo graphs are tiny; recursion depth is bounded by the node count.
"""

from typing import Dict, Generator, List, Set

from graph import Graph
from algorithms.step import ProgramPoint, Step, TraceBuilder


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "stack ← [start]",                     # 0
    "def dfs(u):",                         # 1
    "    visited.add(u)",                  # 2
    "    for v in adj(u) not visited:",    # 3
    "        stack.push(v); dfs(v)",       # 4
    "        stack.pop()  # back to u",    # 5
]

PROGRAM_LINES: Dict[ProgramPoint, int] = {
    ProgramPoint.INITIALIZE: 0,
    ProgramPoint.VISIT:      2,
    ProgramPoint.BACKTRACK:  5,
}


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dfs(graph: Graph) -> Generator[Step, None, None]:

    tb      = TraceBuilder()
    source  = graph.start
    stack   = [source]
    visited: Set[int] = set()

    # --- init step ---
    yield tb.emit(
        ProgramPoint.INITIALIZE,
        frontier=stack,
        visited=visited,
        message="Initialize search",
        explanation=(
            f"Push '{graph.label(source)}' onto the stack. DFS dives as deep as "
            f"possible before backtracking."
        ),
    )

    yield from _visit(graph, source, stack, visited, tb)


def _visit(
    graph: Graph,
    node: int,
    stack: List[int],
    visited: Set[int],
    tb: TraceBuilder,
) -> Generator[Step, None, None]:
    visited.add(node)
    yield tb.emit(
        ProgramPoint.VISIT,
        frontier=stack,
        visited=visited,
        current=node,
        message=f"Visiting {graph.label(node)}",
        explanation=(
            f"Enter '{graph.label(node)}' and mark it VISITED. DFS explores its "
            f"first unvisited neighbour before coming back here."
        ),
    )

    for nbr, _ in graph.neighbours(node):
        if nbr in visited:
            continue
        stack.append(nbr)
        yield from _visit(graph, nbr, stack, visited, tb)
        stack.pop()
        yield tb.emit(
            ProgramPoint.BACKTRACK,
            frontier=stack,
            visited=visited,
            current=node,
            message=f"Backtrack to {graph.label(node)}",
            explanation=(
                f"The branch below '{graph.label(nbr)}' is exhausted. Pop it off the "
                f"stack and move back up to '{graph.label(node)}'."
            ),
        )
