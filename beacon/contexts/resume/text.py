"""
Line normalization and text helpers for resume bullets.

normalize_line() is the shared cleanup primitive: every extractor, seeder and
scorer in this context works on its output. A return value of "" means
"drop this line".
"""

import re
from dataclasses import dataclass
from typing import Optional

from beacon.utils.text_processing import collapse_whitespace
from beacon.utils.vocabulary import Vocabulary, default_vocabulary


@dataclass(frozen=True)
class TextPatterns:
    """Regex patterns for resume line cleanup."""

    # Single leading bullet marker plus trailing whitespace
    LEADING_MARKER: re.Pattern = re.compile(r"^[-•*]\s*")

    # Line that starts with a marker and has content ("- Led a team")
    MARKED_LINE: re.Pattern = re.compile(r"^[-•*]\s+.+$", re.MULTILINE)

    # Bare numbers and percentages ("8", "12.5", "40%")
    QUANTIFIER: re.Pattern = re.compile(r"\d+\.?\d*%?")

    # Currency, comma-grouped numbers and percentages ("$1,200", "40%")
    NUMERIC_SIGNAL: re.Pattern = re.compile(r"\$?\d+[\d,]*\.?\d*%?")

    NON_ALPHANUMERIC: re.Pattern = re.compile(r"[^a-zA-Z0-9]")


# Order matters: &amp; is decoded before the others, matching browser textarea paste
HTML_ENTITIES = (
    (re.compile(r"&nbsp;", re.IGNORECASE), " "),
    (re.compile(r"&amp;", re.IGNORECASE), "&"),
    (re.compile(r"&lt;", re.IGNORECASE), "<"),
    (re.compile(r"&gt;", re.IGNORECASE), ">"),
    (re.compile(r"&quot;", re.IGNORECASE), '"'),
    (re.compile(r"&#39;", re.IGNORECASE), "'"),
)

MIN_ALPHANUMERIC_CHARS = 3

NUMBER_MARK_CLASS = "signal-number"
VERB_MARK_CLASS = "signal-verb"


def decode_entities(text: str) -> str:
    """
    Decode the fixed set of HTML entities that show up in pasted resumes.

    Example:
        >>> decode_entities("R&amp;D &gt; 40%")
        'R&D > 40%'
    """
    if not text:
        return ""
    for pattern, replacement in HTML_ENTITIES:
        text = pattern.sub(replacement, text)
    return text


def escape_html(text: str) -> str:
    """Escape text for safe inclusion in HTML markup."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )


def capitalize_word(value: str) -> str:
    """
    First letter uppercase, remainder lowercase.

    Example:
        >>> capitalize_word("mANAGED")
        'Managed'
    """
    if not value:
        return ""
    return value[:1].upper() + value[1:].lower()


def strip_marker(text: str) -> str:
    """Remove a single leading bullet marker ("-", "•" or "*")."""
    return TextPatterns.LEADING_MARKER.sub("", text)


def normalize_line(raw: str, vocabulary: Optional[Vocabulary] = None) -> str:
    """
    Clean a single resume line, or return "" if it carries no bullet content.

    Steps:
    1. Decode HTML entities
    2. Strip a leading bullet marker
    3. Collapse whitespace and trim

    The cleaned line is then dropped (returns "") when it is a known resume
    heading ("Experience"), a date or date range ("Jan 2020 - Current"), or has
    fewer than three alphanumeric characters.

    Args:
        raw: Raw line, possibly with a marker and entities
        vocabulary: Lookup tables (defaults to the configured vocabulary)

    Returns:
        Cleaned line, or "" if the line should be dropped

    Examples:
        >>> normalize_line("-   Led  3 launches")
        'Led 3 launches'
        >>> normalize_line("Experience")
        ''
        >>> normalize_line("Jan 2020 – Current")
        ''
    """
    vocabulary = vocabulary or default_vocabulary()

    cleaned = collapse_whitespace(strip_marker(decode_entities(raw)))
    if not cleaned:
        return ""

    if cleaned.lower() in vocabulary.heading_noise:
        return ""

    if vocabulary.date_range_pattern.fullmatch(cleaned):
        return ""

    if len(TextPatterns.NON_ALPHANUMERIC.sub("", cleaned)) < MIN_ALPHANUMERIC_CHARS:
        return ""

    return cleaned


def normalize_text_line(raw: str, vocabulary: Optional[Vocabulary] = None) -> str:
    """Normalize a line and re-prefix it with "• ", or return "" if dropped."""
    normalized = normalize_line(raw, vocabulary)
    if not normalized:
        return ""
    return f"• {normalized}"


def count_power_verbs(text: str, vocabulary: Optional[Vocabulary] = None) -> int:
    """Count whole-word vocabulary verb occurrences (case-insensitive)."""
    if not text:
        return 0
    vocabulary = vocabulary or default_vocabulary()
    return len(vocabulary.any_verb_pattern.findall(decode_entities(text)))


def highlight_resume(text: str, vocabulary: Optional[Vocabulary] = None) -> str:
    """
    Render resume text as HTML with numbers and action verbs wrapped in <mark>.

    Marking runs on the decoded text and every segment is HTML-escaped on the
    way out, so digits inside escape sequences are never marked.
    """
    if not text:
        return ""
    vocabulary = vocabulary or default_vocabulary()

    decoded = decode_entities(text)
    signal = re.compile(
        rf"(?P<number>{TextPatterns.QUANTIFIER.pattern})|{vocabulary.any_verb_pattern.pattern}",
        re.IGNORECASE,
    )

    parts = []
    last_end = 0
    for match in signal.finditer(decoded):
        css_class = NUMBER_MARK_CLASS if match.group("number") else VERB_MARK_CLASS
        parts.append(escape_html(decoded[last_end : match.start()]))
        parts.append(f'<mark class="{css_class}">{escape_html(match.group(0))}</mark>')
        last_end = match.end()
    parts.append(escape_html(decoded[last_end:]))
    return "".join(parts)
