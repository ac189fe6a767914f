"""
Session logging for the editor engine.

One loguru configuration per editing session: a DEBUG file log inside the
session's log directory plus a colorized console sink. Each session log
opens with a provenance header. Context-specific prefix wrappers live in
contexts/{context}/logger.py.

Environment:
    VITAE_LOG_DIR: Base directory for session log directories (default: outs/logs)
    VITAE_LOG_LEVEL: Console level (default: INFO); the file log is always DEBUG
"""

import os
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

LOG_BASE_DIR = Path(os.getenv("VITAE_LOG_DIR", "outs/logs"))

LEVEL_COLORS = {
    "DEBUG": "<dim>",
    "WARNING": "<yellow>",
    "ERROR": "<red>",
}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | {message}"
CONSOLE_FORMAT = "<level>{level: <7}</level> | <level>{message}</level>"


def session_log_dir(base_dir: Path = None, label: str = "session") -> Path:
    """
    Fresh timestamped directory name for one session's logs (not created).

    Example:
        session_log_dir()  # outs/logs/session_20251114_093012
    """
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return Path(base_dir or LOG_BASE_DIR) / f"{label}_{stamp}"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
    level_colors: dict = None,
) -> Path:
    """
    Route loguru output to a session log file and the console.

    Replaces any sinks configured earlier in the process.

    Args:
        context_name: Names the log file, e.g. "edit" -> edit.log
        log_dir: Session log directory (created if missing)
        extra_provenance: Extra header lines, e.g. {"Template": "classic"}
        level_colors: Overrides for LEVEL_COLORS

    Returns:
        Path to the log file
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=os.getenv("VITAE_LOG_LEVEL", "INFO").upper(),
        colorize=True,
    )

    log_provenance(context_name, extra_provenance)
    return log_file


def log_provenance(context_name: str, extra_context: dict = None) -> None:
    """Write the session header: who started it, from where, and with what."""
    from vitae import __version__

    lines = {
        "Session": context_name,
        "vitae": __version__,
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": sys.version.split()[0],
        **(extra_context or {}),
    }

    logger.info("-" * 60)
    for key, value in lines.items():
        logger.info(f"{key}: {value}")
    logger.info("-" * 60)
