"""
Logging Configuration
=====================
Console (and optionally file) logging for the 'stressstrainplotter' package.

Model and controller modules only call ``logging.getLogger(__name__)``;
handlers are attached once here, from ``main()``.
"""
import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "stressstrainplotter"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def _make_handler(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach stdout (and optional file) handlers to the package logger.

    Args:
        level: Level number or name, e.g. logging.DEBUG or "DEBUG".
        log_file: Path of a log file, overwritten on every start.

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Calling twice must not duplicate every record
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    logger.addHandler(_make_handler(logging.StreamHandler(sys.stdout), level, formatter))
    if log_file:
        logger.addHandler(
            _make_handler(logging.FileHandler(log_file, mode='w', encoding='utf-8'), level, formatter)
        )

    logger.debug(f"Logging initialized at level {logging.getLevelName(level)}.")
    return logger
