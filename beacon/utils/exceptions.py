"""Custom exceptions for configuration loading."""

from pathlib import Path
from typing import Optional


class VocabularyConfigError(ValueError):
    """
    Exception raised when a vocabulary config file is missing or malformed.

    Attributes:
        message: Error description
        config_path: Path of the config file that failed to load
        key: Top-level key that was missing or had the wrong shape
    """

    def __init__(
        self,
        message: str,
        config_path: Optional[Path] = None,
        key: Optional[str] = None,
    ):
        self.message = message
        self.config_path = config_path
        self.key = key

        parts = [message]
        if config_path:
            parts.append(f"Config: {config_path}")
        if key:
            parts.append(f"Key: {key}")

        super().__init__("\n".join(parts))
