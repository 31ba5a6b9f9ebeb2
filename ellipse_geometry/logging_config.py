"""ellipse_geometry.logging_config

Opt-in console and file output for the package logger.

The library itself only logs through ``logging.getLogger(__name__)`` and
ships a ``NullHandler`` on the ``ellipse_geometry`` logger. Applications
that want to see the DEBUG summaries of the tessellation call
``setup_logging`` once.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

PACKAGE_LOGGER = "ellipse_geometry"

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _is_installed_handler(handler: logging.Handler) -> bool:
    return not isinstance(handler, logging.NullHandler)


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Route ``ellipse_geometry`` log records to stdout and optionally a file.

    Handlers added by an earlier call are closed and replaced, so the
    function can be called again to change the level or the log file.

    Args:
        level: Logging level, as a number or a name such as "DEBUG"
        log_file: Optional path of a log file (overwritten)

    Returns:
        The package logger
    """
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {name!r}")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in [h for h in logger.handlers if _is_installed_handler(h)]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
