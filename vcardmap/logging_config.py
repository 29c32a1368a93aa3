"""
Logging setup for the vcardmap package
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
PACKAGE_LOGGER = "vcardmap"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach one stream handler to the package logger.

    Safe to call repeatedly; the level is updated and no handler is added twice.
    """
    if level is None:
        from .config import get_settings

        level = get_settings().log_level

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not any(getattr(h, "_vcardmap", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._vcardmap = True
        logger.addHandler(handler)
    return logger
