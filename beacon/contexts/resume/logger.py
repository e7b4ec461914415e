"""
Resume context logger.

Provides logging interface for resume context with automatic [resume] prefix.
All resume modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from beacon.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[resume]"


def setup_resume_logger(log_dir: Path, vocabulary_path: Path) -> Path:
    """
    Setup logger for resume context.

    Args:
        log_dir: Directory for this analysis session
        vocabulary_path: Vocabulary file in use, recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="resume",
        log_dir=log_dir,
        extra_provenance={"Vocabulary": vocabulary_path},
    )


# Wrapper functions with automatic [resume] prefix


def _log_info(message: str) -> None:
    """Log info message with [resume] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [resume] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [resume] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [resume] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [resume] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level resume-specific logging helpers


def log_analysis_start(source: Path, log_file: Path) -> None:
    """Log start of a resume analysis."""
    _log_info(f"Analyzing {source.name}")
    _log_info(f"Log file: {log_file}")
    _log_debug(f"Source: {source}")


def log_analysis_result(session, elapsed_time: float, verbose: bool = False) -> None:
    """
    Log analysis result with per-bullet scores.

    Args:
        session: ResumeSession from analyze_resume()
        elapsed_time: Time taken
        verbose: Log every bullet at INFO instead of DEBUG
    """
    if not session.bullets:
        _log_warning(f"No bullets found ({elapsed_time:.2f}s)")
        return

    report = session.signal_report
    _log_success(
        f"{len(session.bullets)} bullets analyzed ({elapsed_time:.2f}s): "
        f"{report.visible}% visible signal, {report.numbers} quantified, {report.verbs} action verbs"
    )

    log_bullet = _log_info if verbose else _log_debug
    for i, bullet in enumerate(session.bullets, 1):
        log_bullet(f"  {i}. [{bullet.baseline_score} -> {bullet.improved_score}] {bullet.original}")
