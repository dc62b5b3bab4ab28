"""Logging configuration for binomtest.

The package logs through loguru and is silent by default: importing
``binomtest`` disables its records so that applications opt in explicitly.
`setup_logging` installs a stderr sink and re-enables the package.
"""
from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

PACKAGE = "binomtest"


def setup_logging(level: str = "INFO", log_file: Path | None = None) -> None:
    """Configure loguru sinks for console and optional file output.

    Args:
        level: Log level (TRACE, DEBUG, INFO, WARNING, ERROR)
        log_file: If provided, also write uncolored records to this file
    """
    # Remove default handler
    logger.remove()

    log_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan> | "
        "<level>{message}</level>"
    )
    logger.add(sys.stderr, format=log_format, level=level, colorize=True)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name} | {message}",
            level=level,
            colorize=False,
        )

    logger.enable(PACKAGE)


def disable_logging() -> None:
    """Silence records emitted from inside the package."""
    logger.disable(PACKAGE)


__all__ = ["setup_logging", "disable_logging"]
