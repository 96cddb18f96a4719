"""
Logging Configuration
Sets up the 'foamvis' package logger from the command line options.
"""
import logging
import sys
from typing import Optional, Union

LOGGER_NAME = "foamvis"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: Union[int, str] = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'foamvis' logger and returns it.

    Args:
        level: A level number or a level name as given to ``--log-level``
            (e.g. "DEBUG", "INFO"). Unknown names raise ValueError.
        log_file: Optional path; the log is then written there as well.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    # Handlers from an earlier call (tests, New document) are replaced
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging initialized at {logging.getLevelName(logger.level)}.")
    return logger
