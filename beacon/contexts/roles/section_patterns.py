"""
Pattern matching for job description heading identification.

The label table itself is configuration (section_labels in the vocabulary
file). This module holds the cleanup patterns and the matching helpers.

Pattern classes follow the convention from resume/text.py:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from beacon.utils.text_processing import title_case_words
from beacon.utils.vocabulary import Vocabulary, default_vocabulary


@dataclass(frozen=True)
class HeadingPatterns:
    """Regex patterns for cleaning candidate heading lines."""

    # Leading bullets, numbering and whitespace: "1. ", "- ", "• ", "2) "
    LEADING_NOISE: re.Pattern = re.compile(r"^[-•*\d.)\s]+")

    TRAILING_COLON: re.Pattern = re.compile(r":$")


def clean_heading_line(line: str) -> str:
    """
    Strip leading bullet/numbering characters and surrounding whitespace.

    Example:
        >>> clean_heading_line("2) Key Duties:")
        'Key Duties:'
    """
    return HeadingPatterns.LEADING_NOISE.sub("", line.strip()).strip()


def match_section(
    line: str, vocabulary: Optional[Vocabulary] = None
) -> Optional[Tuple[str, Tuple[str, ...]]]:
    """
    Find the first section whose label starts the line.

    Sections are checked in table order and labels in list order, so a line
    like "Skills & experience" resolves to whichever section lists a matching
    label first.

    Args:
        line: Candidate heading line
        vocabulary: Lookup tables (defaults to the configured vocabulary)

    Returns:
        (section key, labels) for the first match, or None

    Examples:
        >>> match_section("Responsibilities:")[0]
        'responsibilities'
        >>> match_section("Own the roadmap") is None
        True
    """
    vocabulary = vocabulary or default_vocabulary()
    normalized = HeadingPatterns.LEADING_NOISE.sub("", line.lower().strip())

    for key, labels in vocabulary.section_labels:
        if any(normalized.startswith(label) for label in labels):
            return key, labels
    return None


def format_heading(line: str, fallback_label: str) -> str:
    """
    Display heading for a matched line.

    Cleans markers and a trailing colon and uppercases each word's first
    letter. Falls back to the title-cased label when nothing is left.

    Examples:
        >>> format_heading("- what you will do:", "what you will do")
        'What You Will Do'
        >>> format_heading("1.", "overview")
        'Overview'
    """
    cleaned = clean_heading_line(line)
    if not cleaned:
        return title_case_words(fallback_label)
    return title_case_words(HeadingPatterns.TRAILING_COLON.sub("", cleaned))
