"""Logging configuration for localenames."""

import logging

LOGGER_NAME = "localenames"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Configure and return the localenames logger.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR)
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    if not logger.handlers:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(stream_handler)

    return logger
