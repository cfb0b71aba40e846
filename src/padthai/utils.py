"""
Utilities for Pad Thai checkers.
Logger setup shared by the command line and embedding applications.
"""

import sys
import logging
from pathlib import Path
from typing import Optional, Union

from .config import LOG_FORMAT, LOG_FORMAT_DETAILED, LOG_DATE_FORMAT


# =============================================================================
# LOGGING UTILITIES
# =============================================================================

def setup_logger(
    name: str = "padthai",
    log_file: Optional[Union[str, Path]] = None,
    level: Union[int, str] = logging.INFO
) -> logging.Logger:
    """
    Setup a logger with console and optional file output.
    Uses centralized log format configuration.

    Library modules log under ``padthai.<module>``, so configuring the
    ``padthai`` logger covers the whole engine.

    Args:
        name: Logger name
        log_file: Path to log file (optional)
        level: Logging level, as a number or a name such as "DEBUG"

    Returns:
        Configured logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers if logger already configured
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    # Console handler - uses simpler format
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(console_handler)

    # File handler - uses detailed format
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT_DETAILED, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger
