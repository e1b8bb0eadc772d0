"""Logging configuration helpers."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
TRACE_LOGGERS = ("hookwork.registry", "hookwork.dispatcher")


def configure_logging(level: str = "INFO", *, trace_hooks: bool = False) -> None:
    """Configure root logging; per-callback tracing stays quiet unless ``trace_hooks``."""
    resolved = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    for name in TRACE_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if trace_hooks else max(resolved, logging.INFO))
