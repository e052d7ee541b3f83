"""Universal debug/logging utility for anigraph.

Provides debug(), warn(), error() functions for consistent logging.
Debug output is controlled by the ANIGRAPH_DEBUG environment variable.
Logs to stderr via a single ``anigraph`` logger.
"""

import logging
import os
from typing import Optional

DEBUG_ON = os.getenv("ANIGRAPH_DEBUG", "0") == "1"

_logger: Optional[logging.Logger] = None


def setup_logger() -> logging.Logger:
    global _logger
    if _logger is not None:
        return _logger
    logger = logging.getLogger("anigraph")
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("[%(levelname)s] %(asctime)s %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG if DEBUG_ON else logging.INFO)
    _logger = logger
    return logger


def debug(msg: str) -> None:
    """Log a debug message if debugging is enabled."""
    if DEBUG_ON:
        setup_logger().debug(msg)


def warn(msg: str) -> None:
    """Log a warning message."""
    setup_logger().warning(msg)


def error(msg: str) -> None:
    """Log an error message."""
    setup_logger().error(msg)
