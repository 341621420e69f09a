import logging
import os
import sys

LOG_LEVEL_ENV = "SYN_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _level_from_env(default: int) -> int:
    level_name = os.getenv(LOG_LEVEL_ENV)
    if not level_name:
        return default
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else default


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger writing to stderr.

    The CLI logger defaults to INFO, everything else to WARNING, so stdout
    stays reserved for help and version text. SYN_LOG_LEVEL overrides both.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    default_level = logging.INFO if name.endswith(".cli") else logging.WARNING
    logger.setLevel(_level_from_env(default_level))
    return logger
