"""Logging setup for the tinygrep command line.

Only the ``tinygrep`` package logger is configured. Handlers installed on the
root logger by an embedding application are left alone, and tinygrep records
do not propagate to them once the CLI has taken over.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "tinygrep"

_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_PLAIN_FORMAT = "%(levelname)s: %(message)s"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    logger_name: str = PACKAGE_LOGGER_NAME,
) -> logging.Logger:
    """Configure the tinygrep package logger for a CLI run.

    Handlers from a previous call are closed and replaced, so calling this
    more than once (as tests driving ``main`` do) does not duplicate output.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO"). Unknown names
        fall back to INFO.
    log_file : str, optional
        Also append records to this file. A file that cannot be opened is
        reported as a warning and console logging continues.
    trace_mode : bool, default False
        Emit timestamps and logger names, for following compile and
        traversal steps.
    logger_name : str, default "tinygrep"
        Logger to configure

    Returns
    -------
    logging.Logger
        The configured logger

    """
    resolved_level = _resolve_level(log_level)

    package_logger = logging.getLogger(logger_name)
    package_logger.setLevel(resolved_level)
    package_logger.propagate = False
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    if trace_mode:
        formatter = logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(_PLAIN_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(resolved_level)
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
            package_logger.info("Logging to file: %s", log_file)

    return package_logger
