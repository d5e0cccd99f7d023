"""Shared utility functions for CLI commands."""

import sys

from loguru import logger


def configure_logging(debug: bool) -> None:
    """Route loguru output to stderr.

    With ``debug`` every message down to DEBUG is shown; otherwise only
    warnings and errors.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if debug else "WARNING",
        format="[{level}] {message}",
        colorize=False,
    )


def mask_key(api_key: str) -> str:
    """Mask an API key for display."""
    if not api_key:
        return "not set"
    return api_key[:8] + "..." + api_key[-4:] if len(api_key) > 12 else "***"
