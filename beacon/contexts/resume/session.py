"""
Resume analysis session.

Builds BulletRecords from pasted text and applies field edits. The session is
a plain value: selection and draft fields travel through function arguments
and every edit returns a new session.

restore_session() turns whatever a caller loaded from storage into a valid
session without raising, so a corrupt store never blocks the workflow.
"""

import hashlib
import math
from dataclasses import replace
from typing import Any, Iterable, Mapping, Optional

from beacon.contexts.resume.bullets import build_bullet, extract_bullets, seed_fields
from beacon.contexts.resume.data_structures import (
    EMPTY_SESSION,
    BulletFields,
    BulletRecord,
    ResumeSession,
    SignalReport,
)
from beacon.contexts.resume.logger import _log_debug
from beacon.contexts.resume.scoring import improved_score, score_bullet
from beacon.contexts.resume.text import TextPatterns, count_power_verbs, strip_marker
from beacon.utils.text_processing import collapse_whitespace
from beacon.utils.vocabulary import Vocabulary

FIELD_NAMES = ("verb", "task", "impact", "quantifier")


def bullet_id(original: str, index: int, prefix: str = "bullet") -> str:
    """
    Deterministic record id from position and content.

    Example:
        >>> bullet_id("Led 3 launches", 0)
        'bullet-0-...'
    """
    digest = hashlib.sha1(original.encode("utf-8")).hexdigest()[:5]
    return f"{prefix}-{index}-{digest}"


def create_bullet_record(
    line: str, index: int, vocabulary: Optional[Vocabulary] = None
) -> BulletRecord:
    """
    Analyze one extracted bullet.

    Args:
        line: Bullet text, usually from extract_bullets()
        index: Position of the bullet in the resume
        vocabulary: Lookup tables (defaults to the configured vocabulary)

    Returns:
        BulletRecord with seeded fields, rebuilt bullet and both scores
    """
    sanitized = collapse_whitespace(line)
    fields = seed_fields(sanitized, vocabulary)
    improved = build_bullet(fields)
    original = strip_marker(sanitized)

    return BulletRecord(
        id=bullet_id(original, index),
        original=original,
        fields=fields,
        baseline_score=score_bullet(sanitized, vocabulary),
        improved=improved,
        improved_score=improved_score(sanitized, improved, fields, vocabulary),
    )


def update_bullet_fields(
    record: BulletRecord, fields: BulletFields, vocabulary: Optional[Vocabulary] = None
) -> BulletRecord:
    """
    Apply edited fields to a record.

    fields, improved and improved_score are recomputed together; original and
    baseline_score never change.
    """
    improved = build_bullet(fields)
    return replace(
        record,
        fields=fields,
        improved=improved,
        improved_score=improved_score(record.original, improved, fields, vocabulary),
    )


def build_signal_report(
    bullets: Iterable[BulletRecord], vocabulary: Optional[Vocabulary] = None
) -> SignalReport:
    """
    Summarize baseline signal across bullets.

    visible is the rounded mean baseline score, hidden its complement.
    numbers counts bullets with a numeric token; verbs counts action-verb hits.
    """
    bullets = list(bullets)
    if not bullets:
        return SignalReport()

    mean = sum(bullet.baseline_score for bullet in bullets) / len(bullets)
    visible = max(0, min(100, round(mean)))
    numbers = sum(1 for bullet in bullets if TextPatterns.NUMERIC_SIGNAL.search(bullet.original))
    verbs = sum(count_power_verbs(bullet.original, vocabulary) for bullet in bullets)

    return SignalReport(visible=visible, hidden=100 - visible, numbers=numbers, verbs=verbs)


def analyze_resume(
    text: str, analyzed_at: Optional[str] = None, vocabulary: Optional[Vocabulary] = None
) -> ResumeSession:
    """
    Run the full resume analysis.

    Args:
        text: Pasted resume text
        analyzed_at: Timestamp recorded on the session (caller-supplied so the
                     analysis itself stays deterministic)
        vocabulary: Lookup tables (defaults to the configured vocabulary)

    Returns:
        ResumeSession with one record per extracted bullet and the first bullet selected
    """
    lines = extract_bullets(text, vocabulary)
    bullets = tuple(create_bullet_record(line, i, vocabulary) for i, line in enumerate(lines))
    _log_debug(f"Extracted {len(bullets)} bullets from {len((text or '').splitlines())} lines")

    return ResumeSession(
        resume_text=text or "",
        bullets=bullets,
        selected_bullet_id=bullets[0].id if bullets else None,
        last_analyzed_at=analyzed_at,
        signal_report=build_signal_report(bullets, vocabulary),
    )


def select_bullet(session: ResumeSession, bullet_id: str) -> ResumeSession:
    """Select a bullet by id. Unknown ids leave the session unchanged."""
    if not any(bullet.id == bullet_id for bullet in session.bullets):
        return session
    return replace(session, selected_bullet_id=bullet_id)


def edit_bullet(
    session: ResumeSession,
    bullet_id: str,
    fields: BulletFields,
    vocabulary: Optional[Vocabulary] = None,
) -> ResumeSession:
    """Apply edited fields to one bullet. Unknown ids leave the session unchanged."""
    if not any(bullet.id == bullet_id for bullet in session.bullets):
        return session

    bullets = tuple(
        update_bullet_fields(bullet, fields, vocabulary) if bullet.id == bullet_id else bullet
        for bullet in session.bullets
    )
    return replace(session, bullets=bullets)


def edit_selected(
    session: ResumeSession, fields: BulletFields, vocabulary: Optional[Vocabulary] = None
) -> ResumeSession:
    """Apply edited fields to the selected bullet, if any."""
    if session.selected_bullet_id is None:
        return session
    return edit_bullet(session, session.selected_bullet_id, fields, vocabulary)


# =============================================================================
# STORED SESSION RESTORE
# =============================================================================


def _string(value: Any, fallback: str = "") -> str:
    return value if isinstance(value, str) else fallback


def _number(value: Any) -> bool:
    # bool is an int subclass but never a valid score
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _clamp(value: Any, low: int, high: int, fallback: int) -> int:
    if not _number(value):
        return fallback
    return int(min(max(value, low), high))


def restore_signal_report(value: Any) -> SignalReport:
    """Clamp a stored signal report into range, filling gaps with defaults."""
    if not isinstance(value, Mapping):
        return SignalReport()

    visible = _clamp(value.get("visible"), 0, 100, 0)
    return SignalReport(
        visible=visible,
        hidden=_clamp(value.get("hidden"), 0, 100, 100 - visible),
        numbers=_clamp(value.get("numbers"), 0, 999, 0),
        verbs=_clamp(value.get("verbs"), 0, 999, 0),
    )


def restore_bullet(
    entry: Any, index: int, vocabulary: Optional[Vocabulary] = None
) -> Optional[BulletRecord]:
    """
    Rebuild a BulletRecord from a stored mapping.

    Non-string fields become "", missing scores are recomputed and a missing
    id gets a fresh deterministic one. Returns None for non-mapping entries.
    """
    if not isinstance(entry, Mapping):
        return None

    raw_fields = entry.get("fields")
    if not isinstance(raw_fields, Mapping):
        raw_fields = {}
    fields = BulletFields(**{name: _string(raw_fields.get(name)) for name in FIELD_NAMES})

    original = _string(entry.get("original"))
    improved = _string(entry.get("improved"), build_bullet(fields) or original)

    baseline = entry.get("baselineScore")
    stored_improved = entry.get("improvedScore")

    return BulletRecord(
        id=_string(entry.get("id")) or bullet_id(original, index, prefix="stored-bullet"),
        original=original,
        fields=fields,
        baseline_score=round(baseline) if _number(baseline) else score_bullet(original or improved, vocabulary),
        improved=improved,
        improved_score=round(stored_improved) if _number(stored_improved) else score_bullet(improved, vocabulary),
    )


def restore_session(data: Any, vocabulary: Optional[Vocabulary] = None) -> ResumeSession:
    """
    Sanitize stored session data into a valid ResumeSession.

    Never raises. Anything that is not a mapping yields an empty session, and a
    selection pointing at a missing bullet falls back to the first bullet.

    Args:
        data: Parsed JSON (or any object) from caller-owned storage
        vocabulary: Lookup tables, used only to recompute missing scores

    Returns:
        ResumeSession
    """
    if not isinstance(data, Mapping):
        return EMPTY_SESSION

    raw_bullets = data.get("bullets")
    if not isinstance(raw_bullets, (list, tuple)):
        raw_bullets = []

    bullets = tuple(
        record
        for record in (
            restore_bullet(entry, index, vocabulary) for index, entry in enumerate(raw_bullets)
        )
        if record is not None
    )

    selected = data.get("selectedBulletId")
    if not isinstance(selected, str) or not any(b.id == selected for b in bullets):
        selected = bullets[0].id if bullets else None

    last_analyzed_at = data.get("lastAnalyzedAt")

    return ResumeSession(
        resume_text=_string(data.get("resumeText")),
        bullets=bullets,
        selected_bullet_id=selected,
        last_analyzed_at=last_analyzed_at if isinstance(last_analyzed_at, str) else None,
        signal_report=restore_signal_report(data.get("signalReport")),
    )
