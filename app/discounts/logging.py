import logging
import os
import sys
from typing import IO

_PKG_LOGGER_NAME = "app.discounts"
_LOG_LEVEL_ENV = "SHIPMENT_DISCOUNTS_LOG_LEVEL"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def add_logging_level(
    level_name: str, level: int, method_name: str, override: bool
) -> None:
    """Append logging module and logging class with missing attributes
    for specific logging level."""

    def instance_log(self, message, *args, **kwargs):
        if self.isEnabledFor(level):
            self._log(level, message, args, **kwargs)

    def module_log(message, *args, **kwargs):
        logging.log(level, message, *args, **kwargs)

    logging.addLevelName(level, level_name)

    if override or not hasattr(logging, level_name):
        setattr(logging, level_name, level)
    if override or not hasattr(logging.getLoggerClass(), method_name):
        setattr(logging.getLoggerClass(), method_name, instance_log)
    if override or not hasattr(logging, method_name):
        setattr(logging, method_name, module_log)


def add_trace_logging_level_if_not_exists(
    level_number: int = logging.DEBUG - 5,
):
    add_logging_level("TRACE", level_number, "trace", False)


def parse_level(level: int | str | None) -> int:
    """Resolve a logging level given as a number, a level name or None.

    None falls back to the ``SHIPMENT_DISCOUNTS_LOG_LEVEL`` environment
    variable and then to WARNING.
    """
    if isinstance(level, int):
        return level
    if level is None:
        level = os.getenv(_LOG_LEVEL_ENV)
        if not level:
            return logging.WARNING
    level = level.strip().upper()
    if level.isdigit():
        return int(level)
    numeric = logging.getLevelName(level)
    if not isinstance(numeric, int):
        raise ValueError(f"unknown logging level: {level!r}")
    return numeric


def configure_logging(
    level: int | str | None = None, *, stream: IO[str] | None = None
) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Library modules only acquire loggers; the command line entry point calls
    this once. Calling it again replaces the handler instead of stacking a
    second one.
    """
    add_trace_logging_level_if_not_exists()
    numeric_level = parse_level(level)
    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(numeric_level)
    logger.propagate = False
    return logger
