"""Lightweight logging setup for the registry core.

Users can override log level with PROGDB_LOG_LEVEL env var and add a log
file with PROGDB_LOG_DIR.

Also includes a helper to shorten captured tool output before it goes into
a log line.
"""
from __future__ import annotations
import logging
import os
from pathlib import Path


def preview_output(text: str, limit: int = 200) -> str:
    """Return a single-line, truncated rendering of captured process output."""
    flat = " ".join(text.split())
    if len(flat) > limit:
        flat = flat[: limit - 3] + "..."
    return flat


LOG_LEVEL = os.getenv("PROGDB_LOG_LEVEL", "DEBUG").upper()


def get_logger(name: str = "progdb") -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        fmt = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(stream_handler)
        # Optional file handler if PROGDB_LOG_DIR is set
        log_dir = os.getenv("PROGDB_LOG_DIR")
        if log_dir:
            try:
                p = Path(log_dir)
                p.mkdir(parents=True, exist_ok=True)
                fh = logging.FileHandler(p / "progdb.log", encoding="utf-8")
                fh.setFormatter(logging.Formatter(fmt))
                logger.addHandler(fh)
            except OSError as e:
                logger.warning(f"cannot open log dir {log_dir}: {e}")
        logger.setLevel(LOG_LEVEL)
        logger.propagate = False
    return logger


core_logger = get_logger("progdb.core")

__all__ = ["get_logger", "core_logger", "preview_output"]
