"""
Shared loguru setup for CLI runs.

Each run writes a DEBUG-level log file under its own directory and echoes
INFO and above to stdout. The file opens with a provenance block so a log can
be traced back to the command and inputs that produced it.

Contexts wrap this in contexts/{context}/logger.py and add their own prefix.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from loguru import logger

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"
PROVENANCE_RULE = "=" * 80

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def provenance_lines(extra: Optional[Dict[str, Any]] = None) -> List[Tuple[str, Any]]:
    """Label/value pairs describing the current process, then any extras."""
    lines = [
        ("Script", sys.argv[0]),
        ("Command", " ".join(sys.argv)),
        ("Working directory", Path.cwd()),
        ("Python", sys.version.split()[0]),
    ]
    lines.extend((extra or {}).items())
    return lines


def log_provenance(extra: Optional[Dict[str, Any]] = None) -> None:
    """Write the provenance block between two rules."""
    logger.info(PROVENANCE_RULE)
    for label, value in provenance_lines(extra):
        logger.info(f"{label}: {value}")
    logger.info(PROVENANCE_RULE)


def setup_logger(
    context_name: str, log_dir: Path, extra_provenance: Optional[Dict[str, Any]] = None
) -> Path:
    """
    Route loguru output to {log_dir}/{context_name}.log and stdout.

    Replaces any previously installed handlers, so calling it again starts a
    fresh run.

    Args:
        context_name: Context identifier, used as the log file stem
        log_dir: Directory for this run (created if missing)
        extra_provenance: Inputs worth recording, e.g. {"Vocabulary": path}

    Returns:
        Path to the log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance(extra_provenance)
    return log_file
