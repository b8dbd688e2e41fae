"""
step.py — Algorithm Step Snapshot
==================================
Every algorithm is a generator that yields Step objects.
A Step is a frozen-in-time picture of everything the visualizer
needs to render one frame:

    • Which nodes are pending in the queue / stack / priority collection
    • Which nodes are visited / finalised
    • Which node is being processed right now
    • Which phase of the algorithm is executing (program point)
    • A short message and a plain-English explanation of *why*
      this step happened

Design decisions:
  - Step is a frozen dataclass.  It is a SNAPSHOT: the algorithm
    generator is the only writer; the playback controller and the
    renderer are pure readers.
  - `frontier` is an ordered tuple (structure contents in storage order),
    `visited` a frozenset and `distances` a read-only mapping, so a Step
    can't be changed after it is built.
  - `program_point` is a semantic phase tag, not a line number.  Each
    algorithm module maps it onto its own pseudocode lines.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple


class ProgramPoint(Enum):
    INITIALIZE = "initialize"
    VISIT      = "visit"        # pop / dequeue / finalise
    DISCOVER   = "discover"     # enqueue a new neighbour
    RELAX      = "discover"     # alias: same phase for the weighted algorithms
    BACKTRACK  = "backtrack"


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number   : 0-based index of this step in the trace.
        frontier      : Node ids pending processing, in structure order.
        visited       : Node ids visited / finalised so far.
        current       : Node id being processed, or None for the bootstrap step.
        program_point : Algorithm phase, drives pseudocode highlighting.
        message       : Short description of the event.
        explanation   : Longer rationale for Learning Mode.
        distances     : {node_id: best-known cost} for Dijkstra / A* (g-cost).
    """

    step_number:   int                    = 0
    frontier:      Tuple[int, ...]        = ()
    visited:       FrozenSet[int]         = frozenset()
    current:       Optional[int]          = None
    program_point: ProgramPoint           = ProgramPoint.INITIALIZE
    message:       str                    = ""
    explanation:   str                    = ""
    distances:     Mapping[int, float]    = field(default_factory=dict, hash=False)

    def __post_init__(self):
        # read-only view over a private copy
        object.__setattr__(self, "distances", MappingProxyType(dict(self.distances)))

    def to_dict(self) -> dict:
        return {
            "step_number":   self.step_number,
            "frontier":      list(self.frontier),
            "visited":       sorted(self.visited),
            "current":       self.current,
            "program_point": self.program_point.value,
            "message":       self.message,
            "explanation":   self.explanation,
            "distances":     {str(k): self.distances[k] for k in sorted(self.distances)},
        }


# ---------------------------------------------------------------------------
# Append-only collector so algorithms don't have to spell out every kwarg
# ---------------------------------------------------------------------------
class TraceBuilder:
    """
    Numbers and snapshots Steps as an algorithm emits them.

    Usage inside an algorithm generator:
        tb = TraceBuilder()
        yield tb.emit(ProgramPoint.VISIT, frontier=queue, visited=visited,
                      current=node, message="Visiting b")
    """

    def __init__(self):
        self.steps: List[Step] = []

    def emit(
        self,
        program_point: ProgramPoint,
        frontier: Iterable[int],
        visited: Iterable[int],
        current: Optional[int] = None,
        message: str = "",
        explanation: str = "",
        distances: Optional[Dict[int, float]] = None,
    ) -> Step:
        step = Step(
            step_number=len(self.steps),
            frontier=tuple(frontier),
            visited=frozenset(visited),
            current=current,
            program_point=program_point,
            message=message,
            explanation=explanation,
            distances=_finite(distances),
        )
        self.steps.append(step)
        return step


def _finite(distances: Optional[Dict[int, float]]) -> Dict[int, float]:
    if not distances:
        return {}
    return {node: d for node, d in distances.items() if d != float("inf")}
