"""
playback.py — Step-by-Step Playback Controller
===============================================
The PlaybackController is the ONLY object the UI interacts with during a
replay.  It owns the Trace, a cursor into it, and a small state machine
driven by one-shot timers from a Scheduler.

State machine:
    IDLE     (cursor = -1)              →  play()   →  PLAYING
    PAUSED   (0 ≤ cursor)               →  play()   →  PLAYING
    PLAYING  →  pause()                 →  PAUSED
    PLAYING  →  (reaches last index)    →  PAUSED, is_finished
    any      →  reset() / load_trace()  →  IDLE

Timer discipline:
  At most one TaskHandle is pending at any instant (`_task`).  Every
  path that leaves PLAYING cancels it first, and every re-arm cancels
  the previous one, so two timers can never both advance the cursor.
  Each tick moves the cursor by exactly one and re-arms only if the end
  hasn't been reached.

This class is NOT thread-safe.  Drive it and its scheduler from one
thread / event loop.
"""

import logging
from enum import Enum
from typing import Callable, Optional

import config
from config import PlaybackConfig
from algorithms.step import Step
from engine.recorder import Trace
from engine.scheduler import Scheduler, TaskHandle

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class PlaybackState(Enum):
    IDLE    = "idle"
    PAUSED  = "paused"
    PLAYING = "playing"


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------
class PlaybackController:
    """
    Attributes:
        trace       : The Trace being replayed (may be empty).
        cursor      : Index of the displayed Step; -1 means "before the first step".
        interval_ms : Delay used for the next scheduled tick.
        on_step     : Optional callback(Step | None) fired every time the cursor moves.
                      The renderer hooks its re-render here.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        playback_config: Optional[PlaybackConfig] = None,
        trace: Optional[Trace] = None,
        on_step: Optional[Callable[[Optional[Step]], None]] = None,
    ):
        cfg = playback_config or PlaybackConfig()
        self._scheduler:  Scheduler            = scheduler
        self._task:       Optional[TaskHandle] = None
        self._playing:    bool                 = False
        self.trace:       Trace                = trace if trace is not None else Trace(algorithm="", graph_name="", steps=())
        self.cursor:      int                  = -1
        self.interval_ms: int                  = config.clamp_interval(cfg.interval_ms)
        self.on_step:     Optional[Callable[[Optional[Step]], None]] = on_step

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load_trace(self, trace: Trace) -> None:
        """Swap in a freshly generated trace and go back to IDLE."""
        self._cancel_timer()
        self._playing = False
        self.trace = trace
        logger.info("Loaded %s trace on %r (%d steps)", trace.algorithm, trace.graph_name, len(trace))
        self._move(-1, force=True)

    def reset(self) -> None:
        """Stop, and rewind to before the first step."""
        self._cancel_timer()
        self._playing = False
        self._move(-1)

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.cursor >= self._last_index:
            return
        if self._playing and self.has_pending_timer:
            return
        self._playing = True
        self._arm()

    def pause(self) -> None:
        self._cancel_timer()
        self._playing = False

    def toggle_play(self) -> None:
        if self._playing:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def step_forward(self) -> bool:
        """Advance one step while not playing.  Returns False if nothing moved."""
        if self._playing or self.cursor >= self._last_index:
            return False
        self._move(self.cursor + 1)
        return True

    def step_back(self) -> bool:
        """
        Rewind one step.  While playing, the pending tick is replaced by a
        fresh one so playback carries on from the earlier position.
        """
        if self.cursor <= -1:
            return False
        if self._playing:
            self._cancel_timer()
            try:
                self._move(self.cursor - 1)
            finally:
                self._arm()
        else:
            self._move(self.cursor - 1)
        return True

    def goto(self, index: int) -> bool:
        """Jump to an arbitrary index (clamped).  Ignored while playing."""
        if self._playing:
            return False
        self._move(max(-1, min(self._last_index, index)))
        return True

    def jump_to_end(self) -> None:
        self.pause()
        self._move(self._last_index)

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, interval_ms: int) -> None:
        """New delay for the NEXT scheduled tick; a pending tick keeps its delay."""
        self.interval_ms = config.clamp_interval(interval_ms)

    def set_speed_preset(self, preset: str) -> None:
        self.set_speed(config.SPEED_PRESETS.get(preset, config.DEFAULT_INTERVAL_MS))

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def state(self) -> PlaybackState:
        if self._playing:
            return PlaybackState.PLAYING
        if self.cursor == -1:
            return PlaybackState.IDLE
        return PlaybackState.PAUSED

    @property
    def is_playing(self) -> bool:
        return self._playing

    @property
    def is_finished(self) -> bool:
        return not self._playing and len(self.trace) > 0 and self.cursor == self._last_index

    @property
    def current_step(self) -> Optional[Step]:
        if 0 <= self.cursor < len(self.trace):
            return self.trace[self.cursor]
        return None

    @property
    def progress(self) -> float:
        if not len(self.trace):
            return 0.0
        return (self.cursor + 1) / len(self.trace)

    @property
    def has_pending_timer(self) -> bool:
        return self._task is not None and not self._task.cancelled

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    @property
    def _last_index(self) -> int:
        return len(self.trace) - 1

    def _arm(self) -> None:
        self._cancel_timer()
        self._task = self._scheduler.call_later(self.interval_ms, self._on_tick)

    def _cancel_timer(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    def _on_tick(self) -> None:
        self._task = None
        if not self._playing:
            return
        try:
            self._move(self.cursor + 1)
        finally:
            # a failing on_step must not strand the controller in PLAYING
            if self.cursor >= self._last_index:
                self._playing = False
                logger.debug("Playback finished at step %d", self.cursor)
            else:
                self._arm()

    def _move(self, index: int, force: bool = False) -> None:
        if index == self.cursor and not force:
            return
        self.cursor = index
        if self.on_step is not None:
            self.on_step(self.current_step)
