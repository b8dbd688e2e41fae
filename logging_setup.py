"""Logging setup for the Graph Algorithm Visualizer."""

import logging
from typing import Optional

import config

logger = logging.getLogger(__name__)

def init_logging(level_name: Optional[str] = None) -> int:
    """Attach a console handler to the root logger and return the level used."""
    level = logging.getLevelName((level_name or config.LOG_LEVEL).upper())
    if not isinstance(level, int):
        level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    stream_handler = None
    for handler in root.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(
            handler, logging.FileHandler
        ):
            stream_handler = handler
            break
    if stream_handler is None:
        stream_handler = logging.StreamHandler()
        root.addHandler(stream_handler)
    stream_handler.setLevel(level)
    stream_handler.setFormatter(formatter)

    logger.debug("Logging initialized at %s", logging.getLevelName(level))
    return level
