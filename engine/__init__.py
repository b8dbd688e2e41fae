"""
engine/
-------
Trace generation, playback & analytics layer.

    from engine import generate, Trace, PlaybackController
"""

from engine.recorder  import ComparisonResult, RunMetrics, Trace, compare, generate, summarize
from engine.scheduler import AsyncioScheduler, ManualScheduler, Scheduler, TaskHandle
from engine.playback  import PlaybackController, PlaybackState

__all__ = [
    "generate",
    "Trace",
    "RunMetrics",
    "ComparisonResult",
    "summarize",
    "compare",
    "Scheduler",
    "TaskHandle",
    "AsyncioScheduler",
    "ManualScheduler",
    "PlaybackController",
    "PlaybackState",
]
