"""Logging configuration for the storefront client.

Every module logs through ``logging.getLogger(__name__)``, so all of
them sit below the ``storefront`` logger configured here.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER = "storefront"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a console handler to the ``storefront`` logger (once)."""
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    # Prevent propagation to root logger (avoid duplicate logs)
    logger.propagate = False
    return logger
