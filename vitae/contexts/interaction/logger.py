"""
Interaction context logger.

Provides logging interface for the interaction context with automatic [interact] prefix.
Hover events fire constantly, so nearly everything here logs at DEBUG.
"""

from loguru import logger

CONTEXT_PREFIX = "[interact]"


def _log_info(message: str) -> None:
    """Log info message with [interact] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [interact] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
