"""
Role decoding: section parsing plus skill detection in one call.

Flow:
    text -> parse_sections -> consolidate_text -> detect_skills
                           -> skill_contexts / calculate_fit_coverage
                           -> relevant_experiences / build_role_bullet
"""

from typing import Dict, Iterable, Mapping, Optional, Sequence, Tuple

from beacon.contexts.roles.bullets import build_role_bullet, relevant_experiences
from beacon.contexts.roles.data_structures import (
    DetectedSkill,
    ExperienceMapping,
    ParsedJobPost,
    RoleBulletDraft,
    RoleDecoding,
)
from beacon.contexts.roles.job_parser import parse_sections
from beacon.contexts.roles.logger import _log_debug
from beacon.contexts.roles.skills import EntryLike, detect_skills
from beacon.utils.timestamp import now
from beacon.utils.vocabulary import Vocabulary

MAX_CONTEXT_LINES = 8


def consolidate_text(post: ParsedJobPost) -> str:
    """Join every section's lines with spaces, sections in order."""
    return " ".join(" ".join(section.lines) for section in post.sections)


def skill_contexts(
    post: ParsedJobPost, skills: Iterable[DetectedSkill], limit: int = MAX_CONTEXT_LINES
) -> Dict[str, Tuple[str, ...]]:
    """
    Lines that mention each detected skill.

    A line counts when it contains any of the skill's matched keywords
    (case-insensitive). Each skill key is present, possibly with no lines.

    Args:
        post: Parsed job post
        skills: Skills from detect_skills()
        limit: Maximum lines kept per skill

    Returns:
        Skill key -> distinct lines in input order, at most `limit`
    """
    skills = list(skills)
    contexts: Dict[str, Dict[str, None]] = {skill.key: {} for skill in skills}

    for section in post.sections:
        for line in section.lines:
            lowered = line.lower()
            for skill in skills:
                if any(keyword.lower() in lowered for keyword in skill.matches):
                    contexts[skill.key][line.strip()] = None

    return {key: tuple(lines)[:limit] for key, lines in contexts.items()}


def calculate_fit_coverage(skills: Sequence[DetectedSkill]) -> float:
    """
    Mean frequency of each skill relative to the most frequent one.

    Returns:
        Value in [0, 1]; 0.0 when no skills were detected

    Example:
        frequencies 4, 2, 2 -> (1 + 0.5 + 0.5) / 3 = 0.667
    """
    if not skills:
        return 0.0
    max_frequency = max(skill.frequency for skill in skills)
    if max_frequency <= 0:
        return 0.0
    relative = [min(1.0, skill.frequency / max_frequency) for skill in skills]
    return sum(relative) / len(relative)


def decode_role(
    text: str,
    dictionary: Mapping[str, EntryLike],
    vocabulary: Optional[Vocabulary] = None,
    experiences: Iterable[ExperienceMapping] = (),
    drafts: Iterable[RoleBulletDraft] = (),
    generated_at: str = None,
) -> RoleDecoding:
    """
    Parse a job description and detect its skills.

    Args:
        text: Raw job description (surrounding whitespace is ignored)
        dictionary: Skill dictionary
        vocabulary: Lookup tables (defaults to the configured vocabulary)
        experiences: Recorded experiences; only those for detected skills are kept
        drafts: Bullet drafts, built with build_role_bullet() (blank ones are skipped)
        generated_at: ISO timestamp of the run (defaults to now)

    Returns:
        RoleDecoding with sections, ranked skills, context lines and fit coverage
    """
    post = parse_sections((text or "").strip(), vocabulary)
    skills = detect_skills(consolidate_text(post), dictionary)
    _log_debug(f"Parsed {len(post.sections)} sections, detected {len(skills)} skills")
    bullets = tuple(bullet for bullet in map(build_role_bullet, drafts) if bullet)

    return RoleDecoding(
        post=post,
        skills=tuple(skills),
        contexts=skill_contexts(post, skills),
        fit_coverage=calculate_fit_coverage(skills),
        experiences=tuple(relevant_experiences(experiences, skills)),
        bullets=bullets,
        generated_at=generated_at or now(),
    )
