"""
Logging Configuration
Attaches handlers to the loggers of the percolation modules.
"""
import logging
import sys
from typing import Optional

PROJECT_LOGGERS = ("percolation_stats", "finite_size")


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the module loggers of this project.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    handlers = []
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    for name in PROJECT_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level)

        # avoid duplicate lines when called more than once
        if logger.hasHandlers():
            logger.handlers.clear()
        for handler in handlers:
            logger.addHandler(handler)

    logging.getLogger(PROJECT_LOGGERS[0]).debug("Logging initialized.")
