"""
Logging setup shared by every module.

Usage:
    from catering.core.logging import get_logger
    logger = get_logger(__name__)
    logger.info("Order %s created", order.id)
"""
import logging
import sys

from catering.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured: set[str] = set()


def get_logger(name: str) -> logging.Logger:
    """Return a stdout logger configured once per name."""
    logger = logging.getLogger(name)
    if name in _configured:
        return logger

    level = logging.getLevelName(settings.LOG_LEVEL)
    if not isinstance(level, int):
        level = logging.INFO

    # Remove any existing handlers to avoid duplicates on reload
    logger.handlers.clear()
    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    logger.propagate = False
    _configured.add(name)
    return logger
