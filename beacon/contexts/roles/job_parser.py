"""
Job description section parsing for the Roles context.

A single pass over the non-empty lines. The parser is always accumulating
into one section; a heading line closes that section (if it collected any
lines) and opens a new one. End of input closes the last section.

Heading lines open sections and are not part of any section's lines. Every
other non-empty line lands in exactly one section, in input order. If no
section collected a line (headings only, or empty input), every line goes into
a single "general" section instead.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional

from beacon.contexts.roles.data_structures import GENERAL_SECTION, ParsedJobPost, ParsedSection
from beacon.contexts.roles.section_patterns import format_heading, match_section
from beacon.utils.vocabulary import Vocabulary

LINE_BREAK = re.compile(r"\r?\n")


@dataclass
class _SectionAccumulator:
    """Mutable working section; frozen into a ParsedSection when finalized."""

    key: str = GENERAL_SECTION
    heading: str = ""
    lines: List[str] = field(default_factory=list)

    def finalize_into(self, sections: List[ParsedSection]) -> None:
        if self.lines:
            sections.append(ParsedSection(key=self.key, heading=self.heading, lines=tuple(self.lines)))


def split_lines(text: str) -> List[str]:
    """Split on line breaks, trim, and drop empty lines."""
    return [line.strip() for line in LINE_BREAK.split(text) if line.strip()]


def parse_sections(text: str, vocabulary: Optional[Vocabulary] = None) -> ParsedJobPost:
    """
    Segment job description text into labeled sections.

    Args:
        text: Raw job description
        vocabulary: Lookup tables (defaults to the configured vocabulary)

    Returns:
        ParsedJobPost with at least one section. Input with no recognized
        heading yields a single "general" section holding every line.

    Example:
        >>> post = parse_sections("Responsibilities:\\nOwn the roadmap\\nQualifications:\\n5 years experience")
        >>> [(s.key, s.lines) for s in post.sections]
        [('responsibilities', ('Own the roadmap',)), ('qualifications', ('5 years experience',))]
    """
    text = text or ""
    lines = split_lines(text)

    sections: List[ParsedSection] = []
    current = _SectionAccumulator()

    for line in lines:
        matched = match_section(line, vocabulary)
        if matched:
            key, labels = matched
            current.finalize_into(sections)
            current = _SectionAccumulator(key=key, heading=format_heading(line, labels[0]))
            continue

        current.lines.append(line)

    current.finalize_into(sections)

    if not sections:
        sections.append(ParsedSection(key=GENERAL_SECTION, heading="", lines=tuple(lines)))

    return ParsedJobPost(sections=tuple(sections), text=text)
