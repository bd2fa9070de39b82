"""
Logging Configuration
Sets up the package logger for the explorer and the layout loop.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "minorexplorer"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'minorexplorer' logger with a console handler and an optional file.

    Args:
        level: Logging level, either numeric (logging.DEBUG) or a name ("DEBUG").
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {level}")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Reconfiguring replaces the handlers instead of stacking duplicates
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging initialized at level %s.", logging.getLevelName(level))
    return logger
