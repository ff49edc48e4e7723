"""Logger configuration for the seqalgo package."""

import logging
import os
import sys

__all__ = ["setup_logger"]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str = "seqalgo", level: str | None = None) -> logging.Logger:
    """
    Attach a stdout handler to a seqalgo logger and return it.

    Modules log through logging.getLogger(__name__), so configuring the
    "seqalgo" logger covers the whole package. Nothing is configured at
    import time, and a logger that already has handlers is left alone.

    Unsupported results are logged at DEBUG; run with LOG_LEVEL=DEBUG to
    see why a call returned Unsupported.

    Args:
        name: Logger name, "seqalgo" or one of its submodules
        level: Log level name; defaults to the LOG_LEVEL env var, then INFO
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
    logger.setLevel((level or os.getenv("LOG_LEVEL", "INFO")).upper())
    logger.propagate = False
    return logger
