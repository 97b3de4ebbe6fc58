"""
Loguru sink setup for hosts embedding the engine.

The library only emits through ``loguru.logger``; it never touches sinks
on import. Hosts call ``setup_logging()`` once at startup.
"""

from __future__ import annotations

import sys

from loguru import logger

from memoria.config import get_settings

LOG_FORMAT = "<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {name}:{function} - {message}"


def setup_logging(level: str | None = None, sink=sys.stderr) -> int:
    """
    Replace loguru's default handler with a compact stderr sink.

    Args:
        level: Minimum level; defaults to ``Settings.log_level``
        sink: Any loguru-compatible sink

    Returns:
        The loguru handler id, so callers can remove it later
    """
    level = (level or get_settings().log_level).upper()
    logger.remove()
    handler_id = logger.add(sink, level=level, format=LOG_FORMAT)
    logger.debug(f"memoria logging configured at {level}")
    return handler_id
