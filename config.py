"""
Configuration for the Graph Algorithm Visualizer.

All tunables live here.  A few can be overridden through environment
variables; anything unparsable falls back to the default.
"""

import logging
import os
from dataclasses import dataclass
from typing import Dict

logger = logging.getLogger(__name__)

# =============================================================================
# Playback
# =============================================================================

# Delay between auto-advance ticks, milliseconds
DEFAULT_INTERVAL_MS = 1200
MIN_INTERVAL_MS = 200
MAX_INTERVAL_MS = 2500

SPEED_PRESETS: Dict[str, int] = {
    "slow":   2000,   # teaching mode
    "medium": DEFAULT_INTERVAL_MS,
    "fast":   600,
    "turbo":  MIN_INTERVAL_MS,
}

DEFAULT_ALGORITHM = "bfs"

# =============================================================================
# HTTP server / logging
# =============================================================================

HOST = os.getenv("GRAPH_VIZ_HOST", "127.0.0.1")
LOG_LEVEL = os.getenv("GRAPH_VIZ_LOG_LEVEL", "INFO").upper()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", name, raw)
        return default


PORT = _env_int("GRAPH_VIZ_PORT", 5000)


def clamp_interval(interval_ms: int) -> int:
    return max(MIN_INTERVAL_MS, min(MAX_INTERVAL_MS, int(interval_ms)))


@dataclass(frozen=True)
class PlaybackConfig:
    """Immutable settings handed to a PlaybackController."""

    interval_ms: int = DEFAULT_INTERVAL_MS

    @classmethod
    def from_env(cls) -> "PlaybackConfig":
        interval = _env_int("GRAPH_VIZ_INTERVAL_MS", DEFAULT_INTERVAL_MS)
        return cls(interval_ms=clamp_interval(interval))
