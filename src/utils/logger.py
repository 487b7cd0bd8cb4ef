"""Centralised Loguru logger shared by the package and the scripts."""
from __future__ import annotations

import sys

from loguru import logger


def configure_logging(level: str = "INFO") -> None:
    """Replace the default Loguru sink with a stderr sink at ``level``.

    Scripts call this once after reading the configuration file; library code
    only imports ``logger`` and never reconfigures it.
    """

    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
    )


__all__ = ["configure_logging", "logger"]
