"""
Editing context logger.

Provides logging interface for the editing context with automatic [edit] prefix.
All editing modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vitae.utils.logger import session_log_dir
from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[edit]"


def setup_editing_logger(log_dir: Path = None, template: str = None) -> Path:
    """
    Setup logger for an editing session.

    Args:
        log_dir: Directory for this editing session (default: a fresh session_log_dir())
        template: Template the document was started from, for provenance

    Returns:
        Path to log file
    """
    if log_dir is None:
        log_dir = session_log_dir()
    return _setup_logger(
        context_name="edit",
        log_dir=log_dir,
        extra_provenance={"Template": template} if template else None,
    )


def _log_info(message: str) -> None:
    """Log info message with [edit] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [edit] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [edit] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
