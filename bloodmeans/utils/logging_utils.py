"""
Logging Utilities Module
-----------------------
Provides helpers for setting up and managing logging.
"""
import logging
import os
from typing import Optional

LOGGER_NAME = 'bloodmeans'
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'


def setup_logging(log_level: str = 'INFO', log_file: Optional[str] = None) -> logging.Logger:
    """
    Sets up and returns the toolbox logger with the specified log level.

    Args:
        log_level (str): 'DEBUG', 'INFO', 'WARNING', 'ERROR' or 'CRITICAL'. Unknown values fall back to INFO.
        log_file (str, optional): If given, messages are also written to this file.

    Returns:
        logging.Logger: The configured logger. Calling this again replaces the
                        handlers instead of adding duplicates.
    """
    logger = logging.getLogger(LOGGER_NAME)
    level = getattr(logging, str(log_level).upper(), logging.INFO)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='w')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"LoggingUtils: Logger setup complete (level {logging.getLevelName(level)}).")
    return logger
