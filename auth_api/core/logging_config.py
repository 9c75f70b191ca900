# Standard library imports
import logging
import sys


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_NOISY_LOGGERS = ("pymongo", "motor", "httpx", "httpcore")


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger for the application.

    Safe to call more than once: basicConfig is a no-op once handlers exist,
    only the level is re-applied.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...)
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, stream=sys.stdout)
    logging.getLogger().setLevel(numeric_level)
    for noisy in _NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)
