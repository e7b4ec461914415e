"""
Bullet extraction, field seeding and reconstruction.

seed_fields() and build_bullet() are near-inverses: seeding splits a bullet
into verb/task/impact/quantifier, building joins fields back into a bullet.
Rebuilding a seeded bullet only changes whitespace, the leading marker and
terminal punctuation.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from beacon.contexts.resume.data_structures import BulletFields
from beacon.contexts.resume.text import (
    TextPatterns,
    capitalize_word,
    normalize_line,
    normalize_text_line,
)
from beacon.utils.text_processing import collapse_whitespace
from beacon.utils.vocabulary import Vocabulary, default_vocabulary


@dataclass(frozen=True)
class BulletPatterns:
    """Markers and patterns for splitting and rebuilding bullets."""

    # Task/impact split markers, searched case-insensitively in the remainder
    IMPACT_MARKERS: tuple = (" by ", " to ")

    # Impact text that already carries its own connector
    CONNECTOR_PREFIXES: tuple = ("to", "by")

    TERMINAL_PUNCTUATION: re.Pattern = re.compile(r"[.!?]$")


def extract_bullets(text: str, vocabulary: Optional[Vocabulary] = None) -> List[str]:
    """
    Split pasted resume text into normalized "• "-prefixed bullets.

    If any line starts with a bullet marker followed by content, only those
    lines are candidates. Otherwise every line is. Lines that normalize to ""
    are dropped and the original order is kept.

    Args:
        text: Raw resume text
        vocabulary: Lookup tables (defaults to the configured vocabulary)

    Returns:
        List of bullets, each starting with "• "

    Example:
        >>> extract_bullets("EXPERIENCE\\n- Led 3 launches\\n- ok\\nJan 2020")
        ['• Led 3 launches']
    """
    if not text:
        return []

    marked = TextPatterns.MARKED_LINE.findall(text)
    candidates = marked if marked else text.split("\n")

    bullets = []
    for line in candidates:
        normalized = normalize_text_line(line, vocabulary)
        if normalized:
            bullets.append(normalized)
    return bullets


def _find_verb(cleaned: str, vocabulary: Vocabulary) -> str:
    """Leading vocabulary verb if present, else the first one anywhere, else ""."""
    match = vocabulary.leading_verb_pattern.match(cleaned) or vocabulary.any_verb_pattern.search(
        cleaned
    )
    return match.group(1) if match else ""


def _split_point(remainder: str) -> int:
    """Index of the earliest impact marker in remainder, or -1."""
    lowered = remainder.lower()
    positions = [lowered.find(marker) for marker in BulletPatterns.IMPACT_MARKERS]
    found = [pos for pos in positions if pos >= 0]
    return min(found) if found else -1


def seed_fields(text: str, vocabulary: Optional[Vocabulary] = None) -> BulletFields:
    """
    Decompose a bullet into verb, task, impact and quantifier.

    Args:
        text: Bullet text (a leading marker is stripped)
        vocabulary: Lookup tables (defaults to the configured vocabulary)

    Returns:
        BulletFields; all fields are empty for text that normalizes to ""

    Example:
        >>> seed_fields("Reduced churn by 12% across 3 regions")
        BulletFields(verb='Reduced', task='churn', impact='by 12% across 3 regions', quantifier='12%')
    """
    vocabulary = vocabulary or default_vocabulary()
    cleaned = normalize_line(text, vocabulary)
    if not cleaned:
        return BulletFields()

    verb = _find_verb(cleaned, vocabulary)
    if verb:
        remainder = collapse_whitespace(
            re.sub(rf"\b{re.escape(verb)}\b", "", cleaned, count=1, flags=re.IGNORECASE)
        )
    else:
        remainder = cleaned

    task = remainder
    impact = ""
    split_index = _split_point(remainder)
    if split_index >= 0:
        task = remainder[:split_index].strip()
        impact = remainder[split_index:].strip()

    quantifier_match = TextPatterns.QUANTIFIER.search(cleaned)

    return BulletFields(
        verb=capitalize_word(verb),
        task=task.strip(),
        impact=impact,
        quantifier=quantifier_match.group(0) if quantifier_match else "",
    )


def build_bullet(fields: BulletFields) -> str:
    """
    Rebuild a bullet string from its fields.

    Pure function of the fields. Order: verb, task, impact (with a "to"
    connector unless the impact already opens with "to" or "by"), then the
    quantifier in parentheses if it does not already appear in the text.

    Args:
        fields: Bullet fields

    Returns:
        "• "-prefixed bullet ending in ".", "!" or "?", or "" if every field is blank

    Example:
        >>> build_bullet(BulletFields(verb="led", task="a team", impact="ship v2", quantifier="5"))
        '• Led a team to ship v2 (5).'
    """
    parts = []
    verb = fields.verb.strip()
    task = fields.task.strip()
    if verb:
        parts.append(capitalize_word(verb))
    if task:
        parts.append(task)
    statement = " ".join(parts)

    impact = fields.impact.strip()
    if impact:
        needs_connector = not impact.lower().startswith(BulletPatterns.CONNECTOR_PREFIXES)
        statement += f" to {impact}" if needs_connector else f" {impact}"

    quantifier = fields.quantifier.strip()
    if quantifier and quantifier not in statement:
        statement += f" ({quantifier})"

    statement = collapse_whitespace(statement)
    if not statement:
        return ""

    bullet = f"• {statement}"
    if not BulletPatterns.TERMINAL_PUNCTUATION.search(bullet):
        bullet += "."
    return bullet
