"""
Text processing utilities for formatting and display.
"""

import re

WHITESPACE_RUN = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    """
    Collapse every whitespace run to a single space and trim.

    Example:
        >>> collapse_whitespace("  Led   a\\tteam \\n")
        'Led a team'
    """
    return WHITESPACE_RUN.sub(" ", text).strip()


def title_case_words(text: str) -> str:
    """
    Uppercase the first character of each whitespace-separated word.

    Unlike str.title(), the rest of each word is left untouched so acronyms
    and mixed-case words survive.

    Example:
        >>> title_case_words("what you will do")
        'What You Will Do'
        >>> title_case_words("key AWS duties")
        'Key AWS Duties'
    """
    if not text:
        return text
    return " ".join(chunk[:1].upper() + chunk[1:] for chunk in WHITESPACE_RUN.split(text))


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Args:
        text: Text to truncate
        max_len: Maximum length including ellipsis

    Returns:
        Original text if within max_len, otherwise truncated with "..."

    Example:
        >>> truncate_display("short", 10)
        'short'
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."
