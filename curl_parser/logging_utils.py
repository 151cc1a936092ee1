"""Logging setup for the curl parser front ends."""

from __future__ import annotations

import sys

from loguru import logger

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_SINK_ID = None


def configure_logging(level: str = "INFO") -> None:
    """Install one stderr sink and turn on the library's log messages."""
    global _SINK_ID
    if _SINK_ID is not None:
        logger.remove(_SINK_ID)
    else:
        logger.remove()
    _SINK_ID = logger.add(
        sys.stderr,
        level=level.upper(),
        format=_FORMAT,
        backtrace=False,
        diagnose=False,
    )
    logger.enable("curl_parser")
