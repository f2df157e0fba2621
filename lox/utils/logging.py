"""
Logging setup for the Lox command line tool.

Library modules only call logging.getLogger(__name__); handlers are
installed here, once, by the entry point.
"""

import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str = "lox") -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.WARNING)
    return logger


def configure_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """Attach the stream handler to the ``lox`` logger and set its level."""
    if isinstance(level, str):
        numeric = logging.getLevelName(level.upper())
        if not isinstance(numeric, int):
            raise ValueError(f"Unknown log level: {level}")
        level = numeric
    logger = get_logger("lox")
    logger.setLevel(level)
    return logger
