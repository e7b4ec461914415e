"""
Value types for the Resume context.

All types are frozen dataclasses: edits produce new values, nothing is mutated
in place. to_dict() emits the camelCase layout used by stored sessions.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class BulletFields:
    """Semantic decomposition of a single bullet. Every field may be empty."""

    verb: str = ""
    task: str = ""
    impact: str = ""
    quantifier: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {
            "verb": self.verb,
            "task": self.task,
            "impact": self.impact,
            "quantifier": self.quantifier,
        }


@dataclass(frozen=True)
class BulletRecord:
    """
    One analyzed bullet.

    original never changes after creation. fields, improved and improved_score
    are always recomputed together (see session.update_bullet_fields).
    """

    id: str
    original: str
    fields: BulletFields
    baseline_score: int
    improved: str
    improved_score: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "original": self.original,
            "fields": self.fields.to_dict(),
            "baselineScore": self.baseline_score,
            "improved": self.improved,
            "improvedScore": self.improved_score,
        }


@dataclass(frozen=True)
class SignalReport:
    """Aggregate resume signal: visible/hidden percentages plus raw counts."""

    visible: int = 0
    hidden: int = 100
    numbers: int = 0
    verbs: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "visible": self.visible,
            "hidden": self.hidden,
            "numbers": self.numbers,
            "verbs": self.verbs,
        }


@dataclass(frozen=True)
class ScoreLabel:
    """Human label for a score plus a presentation accent token."""

    label: str
    accent: str


@dataclass(frozen=True)
class ResumeSession:
    """
    Complete state of one resume analysis.

    The selected bullet is part of the value rather than ambient UI state, so
    every edit flows through function arguments.
    """

    resume_text: str = ""
    bullets: Tuple[BulletRecord, ...] = ()
    selected_bullet_id: Optional[str] = None
    last_analyzed_at: Optional[str] = None
    signal_report: SignalReport = field(default_factory=SignalReport)

    @property
    def selected_bullet(self) -> Optional[BulletRecord]:
        for bullet in self.bullets:
            if bullet.id == self.selected_bullet_id:
                return bullet
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "resumeText": self.resume_text,
            "bullets": [bullet.to_dict() for bullet in self.bullets],
            "selectedBulletId": self.selected_bullet_id,
            "lastAnalyzedAt": self.last_analyzed_at,
            "signalReport": self.signal_report.to_dict(),
        }


EMPTY_SESSION = ResumeSession()
