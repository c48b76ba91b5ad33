"""Logging for lconvert: a TRACE level and the process-wide handler setup.

Levels (ascending):
    TRACE =  5  — per-chunk work in the concurrent transcoder
    DEBUG = 10  — conversion requests, chunk plans
    INFO  = 20  — keymap table built, service startup/shutdown (default)

Usage:
    import lconvert.log  # registers TRACE before any logger.trace() call
    logger = logging.getLogger(__name__)
    logger.trace("very noisy message")
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")

LOG_FORMAT = '[%(asctime)s] %(levelname)-8s %(name)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _trace(self: logging.Logger, message: object, *args: object, **kwargs: object) -> None:
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kwargs)  # type: ignore[attr-defined]


logging.Logger.trace = _trace  # type: ignore[attr-defined]


def setup_logging(debug: bool = False, log_file: str | None = None) -> logging.Logger:
    """Attach handlers to the ``lconvert`` logger.

    Console output goes to stderr (WARNING and up, everything with *debug*).
    When *log_file* is given, a rotating file handler records DEBUG and up.
    Calling this again only adjusts the levels.
    """
    logger = logging.getLogger('lconvert')
    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)

    if getattr(logger, '_lconvert_configured', False):
        for handler in logger.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(
                handler, logging.FileHandler
            ):
                handler.setLevel(logging.DEBUG if debug else logging.WARNING)
        return logger

    fmt = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if log_file is not None:
        try:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=10 * 1024 * 1024,  # 10 MB
                backupCount=5,
                encoding='utf-8',
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(fmt)
            logger.addHandler(file_handler)
        except OSError as e:
            print(f"Warning: Could not setup file logging: {e}", file=sys.stderr)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if debug else logging.WARNING)
    console_handler.setFormatter(fmt)
    logger.addHandler(console_handler)

    logger._lconvert_configured = True  # type: ignore[attr-defined]
    return logger
