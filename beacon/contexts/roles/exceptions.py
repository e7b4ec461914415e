"""Custom exceptions for the Roles context."""

from pathlib import Path
from typing import Optional


class SkillDictionaryError(ValueError):
    """
    Exception raised when a skill dictionary resource cannot be loaded.

    Raised only by the loader. detect_skills() itself never raises.

    Attributes:
        message: Error description
        source: Path of the dictionary file, if loaded from disk
        skill_key: Dictionary key of the malformed entry, if any
    """

    def __init__(
        self,
        message: str,
        source: Optional[Path] = None,
        skill_key: Optional[str] = None,
    ):
        self.message = message
        self.source = source
        self.skill_key = skill_key

        parts = [message]
        if source:
            parts.append(f"Source: {source}")
        if skill_key:
            parts.append(f"Skill: {skill_key}")

        super().__init__("\n".join(parts))
