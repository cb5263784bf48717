# tilesolver/utils/logging_utils.py

import logging
import sys

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_LEVEL = logging.WARNING


def setup_logger(name: str = "tilesolver", level: int = DEFAULT_LEVEL, log_file: str = None,
                 log_format: str = DEFAULT_FORMAT):
    """
    Configures and returns the package logger.

    Args:
        name (str): Logger name; the default covers every tilesolver module.
        level (int): Minimum level to emit (e.g. logging.DEBUG for search progress).
        log_file (str, optional): Also append records to this file. Defaults to None.
        log_format (str, optional): Format string for records.

    Returns:
        logging.Logger: The configured logger.
    """
    logger = logging.getLogger(name)
    # Calling twice must not duplicate output
    if logger.hasHandlers():
        logger.handlers.clear()

    logger.setLevel(level)
    formatter = logging.Formatter(log_format)

    # stderr keeps stdout free for solver output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.debug("Logging to console and %s at %s", log_file, logging.getLevelName(level))

    return logger


def get_level_from_string(level_str: str) -> int:
    """Converts a log level string to a logging level constant."""
    return LOG_LEVELS.get(level_str.lower(), DEFAULT_LEVEL)
