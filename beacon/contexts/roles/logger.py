"""
Roles context logger.

Provides logging interface for roles context with automatic [roles] prefix.
All roles modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from beacon.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[roles]"


def setup_roles_logger(log_dir: Path, skills_path: Path) -> Path:
    """
    Setup logger for roles context.

    Args:
        log_dir: Directory for this decoding session
        skills_path: Skill dictionary in use, recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="roles",
        log_dir=log_dir,
        extra_provenance={"Skill dictionary": skills_path},
    )


# Wrapper functions with automatic [roles] prefix


def _log_info(message: str) -> None:
    """Log info message with [roles] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [roles] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [roles] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [roles] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [roles] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_decoding_result(decoding, elapsed_time: float, verbose: bool = False) -> None:
    """
    Log decoding result with section and skill summaries.

    Args:
        decoding: RoleDecoding from decode_role()
        elapsed_time: Time taken
        verbose: Show every skill instead of the top five
    """
    sections = decoding.post.sections
    _log_success(
        f"{len(sections)} sections, {len(decoding.skills)} skills "
        f"(fit coverage {decoding.fit_coverage:.0%}, {elapsed_time:.2f}s)"
    )
    for section in sections:
        _log_debug(f"  {section.key}: {section.heading or '(untitled)'} ({len(section.lines)} lines)")

    if not decoding.skills:
        _log_warning("No dictionary skills matched")
        return

    limit = len(decoding.skills) if verbose else 5
    for skill in decoding.skills[:limit]:
        _log_info(f"  {skill.label}: {skill.frequency} hits ({skill.confidence:.0%} confidence)")
    if len(decoding.skills) > limit:
        _log_info(f"  ... and {len(decoding.skills) - limit} more skills")
