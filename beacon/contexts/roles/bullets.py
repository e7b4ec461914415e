"""
Bullet drafting and experience mapping for decoded roles.

A drafted bullet reads "• {Verb} {what} by {how} — {impact}." where each
part after the verb is optional.
"""

from typing import Iterable, List, Optional, Sequence

from beacon.contexts.roles.data_structures import DetectedSkill, ExperienceMapping, RoleBulletDraft
from beacon.utils.text_processing import collapse_whitespace

HOW_CONNECTORS = ("by", "through")
IMPACT_MARKERS = ("(", "—")
DEFAULT_CONFIDENCE = 3


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def build_role_bullet(draft: RoleBulletDraft) -> str:
    """
    Assemble a bullet from draft inputs.

    "by" is inserted before `how` unless it already opens with "by" or
    "through"; "—" goes before `impact` unless it opens with "(" or "—".

    Returns:
        Bullet text, or "" when both verb and what are blank

    Example:
        >>> build_role_bullet(RoleBulletDraft("led", "the data team", "hiring 3 analysts", "(2x output)"))
        '• Led the data team by hiring 3 analysts (2x output).'
    """
    verb = _capitalize(draft.verb.strip())
    what = draft.what.strip()
    if not verb and not what:
        return ""

    sentence = " ".join(part for part in (verb, what) if part)

    how = draft.how.strip()
    if how:
        connector = "" if how.lower().startswith(HOW_CONNECTORS) else "by "
        sentence += f" {connector}{how}"

    impact = draft.impact.strip()
    if impact:
        separator = "" if impact.startswith(IMPACT_MARKERS) else "— "
        sentence += f" {separator}{impact}"

    return f"• {collapse_whitespace(sentence)}."


def map_experience(
    skill: DetectedSkill,
    summary: str,
    title: str = "",
    evidence: str = "",
    impact: str = "",
    confidence: int = DEFAULT_CONFIDENCE,
) -> Optional[ExperienceMapping]:
    """
    Record an experience against a detected skill.

    Args:
        skill: Skill the experience demonstrates
        summary: What happened (required)
        title: Defaults to the skill label
        evidence: Newline-separated items; blank lines are dropped
        impact: Outcome text
        confidence: Self rating clamped to 1-5; 0 or None means 3

    Returns:
        ExperienceMapping, or None when the summary is blank
    """
    summary = summary.strip()
    if not summary:
        return None

    items = tuple(item.strip() for item in evidence.splitlines() if item.strip())
    return ExperienceMapping(
        skill_key=skill.key,
        skill_label=skill.label,
        title=(title or skill.label).strip(),
        summary=summary,
        evidence=items,
        impact=impact.strip(),
        confidence=min(5, max(1, confidence or DEFAULT_CONFIDENCE)),
    )


def relevant_experiences(
    experiences: Iterable[ExperienceMapping], skills: Sequence[DetectedSkill]
) -> List[ExperienceMapping]:
    """Experiences whose skill was detected, in their original order."""
    detected = {skill.key for skill in skills}
    return [experience for experience in experiences if experience.skill_key in detected]
