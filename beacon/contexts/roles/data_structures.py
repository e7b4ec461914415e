"""
Value types for the Roles context.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Tuple

GENERAL_SECTION = "general"


@dataclass(frozen=True)
class ParsedSection:
    """A labeled span of job description lines."""

    key: str
    heading: str
    lines: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"key": self.key, "heading": self.heading, "lines": list(self.lines)}


@dataclass(frozen=True)
class ParsedJobPost:
    """Sections in input order plus the untouched input text."""

    sections: Tuple[ParsedSection, ...]
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"sections": [section.to_dict() for section in self.sections], "text": self.text}


@dataclass(frozen=True)
class SkillDictionaryEntry:
    """One skill in the dictionary. keywords keep their configured order."""

    id: str
    label: str
    keywords: Tuple[str, ...] = ()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SkillDictionaryEntry":
        """Build an entry from a plain {id, label, keywords} mapping."""
        keywords = data.get("keywords") or ()
        return cls(
            id=str(data.get("id", "")),
            label=str(data.get("label", "")),
            keywords=tuple(str(keyword) for keyword in keywords),
        )


@dataclass(frozen=True)
class DetectedSkill:
    """
    A dictionary skill found in text.

    matches holds one entry per occurrence, in detection order, so
    frequency == len(matches).
    """

    key: str
    id: str
    label: str
    matches: Tuple[str, ...]
    frequency: int
    confidence: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "id": self.id,
            "label": self.label,
            "matches": list(self.matches),
            "frequency": self.frequency,
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class RoleBulletDraft:
    """Raw inputs for one drafted bullet: verb + what, then how, then impact."""

    verb: str = ""
    what: str = ""
    how: str = ""
    impact: str = ""


@dataclass(frozen=True)
class ExperienceMapping:
    """
    A past experience recorded against one skill.

    confidence is a 1-5 self rating; evidence holds one item per line.
    """

    skill_key: str
    skill_label: str
    title: str
    summary: str
    evidence: Tuple[str, ...] = ()
    impact: str = ""
    confidence: int = 3

    def to_dict(self) -> Dict[str, Any]:
        return {
            "skillKey": self.skill_key,
            "skillLabel": self.skill_label,
            "title": self.title,
            "summary": self.summary,
            "evidence": list(self.evidence),
            "impact": self.impact,
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class RoleDecoding:
    """Everything one decoding run produces."""

    post: ParsedJobPost
    skills: Tuple[DetectedSkill, ...] = ()
    contexts: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
    fit_coverage: float = 0.0
    experiences: Tuple[ExperienceMapping, ...] = ()
    bullets: Tuple[str, ...] = ()
    generated_at: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generatedAt": self.generated_at,
            "fitCoverage": self.fit_coverage,
            "sections": [section.to_dict() for section in self.post.sections],
            "skills": [skill.to_dict() for skill in self.skills],
            "contexts": {key: list(lines) for key, lines in self.contexts.items()},
            "bullets": list(self.bullets),
            "experiences": [experience.to_dict() for experience in self.experiences],
        }
