"""Logging setup for applications embedding the client."""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

logger = logging.getLogger("mobilemessage")
logger.addHandler(logging.NullHandler())

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[Union[str, int]] = None) -> None:
    """Configure root logging and set the package log level.

    The level comes from `level`, else ``MOBILEMESSAGE_LOG_LEVEL``, else INFO.
    The library itself never calls this; applications opt in.
    """
    if level is None:
        level = os.getenv("MOBILEMESSAGE_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        numeric_level = getattr(logging, level.upper(), logging.INFO)
    else:
        numeric_level = level

    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.setLevel(numeric_level)

    # Suppress noisy HTTP client logs
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
