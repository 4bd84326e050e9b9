"""Logging setup for applications that embed styledsearch.

Modules log through ``logging.getLogger(__name__)`` and never attach handlers
themselves. Match counts and dropped matches are reported at DEBUG level
under the ``styledsearch`` logger hierarchy.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

PACKAGE_LOGGER_NAME = "styledsearch"

_PLAIN_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def _attach(logger: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Route ``styledsearch`` diagnostics to stderr and optionally a file.

    Calling this again replaces the handlers installed by the previous call.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "DEBUG"). Unknown names
        fall back to INFO.
    log_file : str, optional
        Path of a file that receives a copy of every record.
    trace_mode : bool, default False
        Include timestamps and logger names in each line.
    stream : IO[str], optional
        Console stream; ``sys.stderr`` when omitted.

    Returns
    -------
    logging.Logger
        The ``styledsearch`` package logger.

    """
    level = _resolve_level(log_level)
    formatter = logging.Formatter(
        _TRACE_FORMAT if trace_mode else _PLAIN_FORMAT,
        datefmt=_TRACE_DATE_FORMAT if trace_mode else None,
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    _attach(package_logger, logging.StreamHandler(stream or sys.stderr), level, formatter)

    if log_file:
        try:
            _attach(package_logger, logging.FileHandler(log_file, mode="a", encoding="utf-8"), level, formatter)
        except OSError as exc:
            package_logger.warning("Could not open log file %s: %s", log_file, exc)
        else:
            package_logger.debug("Logging to file: %s", log_file)

    return package_logger


__all__ = ["PACKAGE_LOGGER_NAME", "configure_logging"]
