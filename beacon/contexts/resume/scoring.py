"""
Heuristic bullet scoring.

score_bullet() awards points for independent signals on the normalized,
lowercased bullet:

    any action verb (whole word)     +30
    action verb at the very start    +10
    number, currency or percentage   +35
    8 to 32 words                    +10
    structure connector              +15

and clamps the sum to [0, 100].

field_bonus() and edit_bonus() only apply to the improved (edited) bullet.
They are added on top of score_bullet(improved) without clamping, so improved
scores can exceed 100. Callers that display a percentage should clamp.
"""

import re
from dataclasses import dataclass
from typing import Optional

from beacon.contexts.resume.bullets import build_bullet
from beacon.contexts.resume.data_structures import BulletFields, ScoreLabel
from beacon.contexts.resume.text import TextPatterns, normalize_line
from beacon.utils.vocabulary import Vocabulary, default_vocabulary


@dataclass(frozen=True)
class ScoreWeights:
    """Points per signal."""

    VERB: int = 30
    LEADING_VERB: int = 10
    NUMBER: int = 35
    CLARITY: int = 10
    STRUCTURE: int = 15

    MIN_WORDS: int = 8
    MAX_WORDS: int = 32


@dataclass(frozen=True)
class BonusWeights:
    """Edit-incentive points for the improved bullet."""

    # field_bonus: per non-blank verb, quantifier, impact
    FIELD: int = 5

    # edit_bonus
    ADDED_LEADING_VERB: int = 4
    ADDED_QUANTIFIER: int = 4
    ADDED_IMPACT: int = 3
    REWRITTEN: int = 2
    ADDED_ANY_VERB: int = 2


STRUCTURE_PATTERN = re.compile(r"\b(?:by|to|result(?:ing)? in|leading to)\b")
CONNECTOR_PATTERN = re.compile(r"\b(?:by|to)\b", re.IGNORECASE)

# (minimum score, label, accent), checked top-down
SCORE_BANDS = (
    (80, "High signal", "emerald"),
    (50, "Moderate", "amber"),
    (0, "Hidden value", "rose"),
)


def score_bullet(bullet: str, vocabulary: Optional[Vocabulary] = None) -> int:
    """
    Score a bullet from 0 to 100.

    Args:
        bullet: Bullet text (markers and entities are handled)
        vocabulary: Lookup tables (defaults to the configured vocabulary)

    Returns:
        Integer score in [0, 100]; 0 for text that normalizes to ""

    Example:
        >>> score_bullet("• Managed a team of 8 waiters")
        75
    """
    vocabulary = vocabulary or default_vocabulary()
    normalized = normalize_line(bullet, vocabulary).lower()
    if not normalized:
        return 0

    has_verb = vocabulary.any_verb_pattern.search(normalized) is not None
    has_leading_verb = vocabulary.leading_verb_pattern.match(normalized) is not None
    has_number = TextPatterns.NUMERIC_SIGNAL.search(normalized) is not None
    word_count = len(normalized.split())
    clarity = ScoreWeights.MIN_WORDS <= word_count <= ScoreWeights.MAX_WORDS
    structure = STRUCTURE_PATTERN.search(normalized) is not None

    score = (
        (ScoreWeights.VERB if has_verb else 0)
        + (ScoreWeights.LEADING_VERB if has_leading_verb else 0)
        + (ScoreWeights.NUMBER if has_number else 0)
        + (ScoreWeights.CLARITY if clarity else 0)
        + (ScoreWeights.STRUCTURE if structure else 0)
    )
    return max(0, min(100, score))


def score_label(score: int) -> ScoreLabel:
    """
    Map a score to a display label.

    Example:
        >>> score_label(85).label
        'High signal'
    """
    for minimum, label, accent in SCORE_BANDS:
        if score >= minimum:
            return ScoreLabel(label=label, accent=accent)
    _, label, accent = SCORE_BANDS[-1]
    return ScoreLabel(label=label, accent=accent)


def field_bonus(fields: BulletFields) -> int:
    """+5 for each of verb, quantifier and impact that is non-blank (max 15)."""
    bonus = 0
    if fields.verb.strip():
        bonus += BonusWeights.FIELD
    if fields.quantifier.strip():
        bonus += BonusWeights.FIELD
    if fields.impact.strip():
        bonus += BonusWeights.FIELD
    return bonus


def edit_bonus(
    original: str, fields: BulletFields, vocabulary: Optional[Vocabulary] = None
) -> int:
    """
    Reward edits that introduce structure the original bullet lacked.

    Args:
        original: The bullet as first extracted
        fields: Current (possibly edited) fields
        vocabulary: Lookup tables (defaults to the configured vocabulary)

    Returns:
        Bonus points (0 to 15)
    """
    vocabulary = vocabulary or default_vocabulary()
    normalized = normalize_line(original, vocabulary)

    starts_with_verb = vocabulary.leading_verb_pattern.match(normalized) is not None
    has_any_verb = vocabulary.any_verb_pattern.search(normalized) is not None
    has_number = TextPatterns.NUMERIC_SIGNAL.search(normalized) is not None
    has_connector = CONNECTOR_PATTERN.search(normalized) is not None

    verb = fields.verb.strip()
    bonus = 0
    if verb and not starts_with_verb:
        bonus += BonusWeights.ADDED_LEADING_VERB
    if fields.quantifier.strip() and not has_number:
        bonus += BonusWeights.ADDED_QUANTIFIER
    if fields.impact.strip() and not has_connector:
        bonus += BonusWeights.ADDED_IMPACT
    if normalize_line(build_bullet(fields), vocabulary) != normalized:
        bonus += BonusWeights.REWRITTEN
    if verb and not has_any_verb:
        bonus += BonusWeights.ADDED_ANY_VERB
    return bonus


def improved_score(
    original: str, improved: str, fields: BulletFields, vocabulary: Optional[Vocabulary] = None
) -> int:
    """score_bullet(improved) plus both bonuses. Not clamped."""
    return (
        score_bullet(improved, vocabulary)
        + field_bonus(fields)
        + edit_bonus(original, fields, vocabulary)
    )
