#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/frontmatter_table/logging_utils.py
"""Log output for the ``frontmatter-table`` command.

Library code only creates module loggers under ``frontmatter_table`` and
logs at debug level. Handlers are attached here, to the package logger, so a
host application's own logging setup is never replaced. Handlers installed
by an earlier call are swapped out; handlers added by anyone else are kept.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

PACKAGE_LOGGER = "frontmatter_table"

# Marks handlers owned by configure_logging
_OWNED_FLAG = "_frontmatter_table_owned"

_PLAIN_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(log_level: int | str) -> int:
    """Return the numeric level for a level number or name such as ``"debug"``.

    Unknown names resolve to ``logging.WARNING``.
    """
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Attach console and optional file handlers to the package logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name.
    log_file : str, optional
        Also append log records to this file. A file that cannot be opened
        is reported as a warning on the console handler.
    trace_mode : bool, default False
        Timestamps and logger names in every line.
    stream : IO[str], optional
        Console stream, ``sys.stderr`` if omitted.

    Returns
    -------
    logging.Logger
        The ``frontmatter_table`` logger.

    """
    level = resolve_level(log_level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in [h for h in logger.handlers if getattr(h, _OWNED_FLAG, False)]:
        logger.removeHandler(handler)
        handler.close()

    if trace_mode:
        formatter = logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(_PLAIN_FORMAT)

    _attach(logger, logging.StreamHandler(stream or sys.stderr), level, formatter)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as e:
            logger.warning("Could not open log file %s: %s", log_file, e)
        else:
            _attach(logger, file_handler, level, formatter)
            logger.debug("Logging to file: %s", log_file)

    return logger


def _attach(logger: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    setattr(handler, _OWNED_FLAG, True)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
