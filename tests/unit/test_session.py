"""Unit tests for resume sessions: analysis, edits and stored-session restore."""

import pytest

from beacon.contexts.resume.data_structures import EMPTY_SESSION, BulletFields, SignalReport
from beacon.contexts.resume.scoring import score_bullet
from beacon.contexts.resume.session import (
    analyze_resume,
    build_signal_report,
    bullet_id,
    create_bullet_record,
    edit_selected,
    restore_bullet,
    restore_session,
    restore_signal_report,
    select_bullet,
    update_bullet_fields,
)

RESUME = """EXPERIENCE
- Managed a team of 8 waiters
- Helped customers
Jan 2020 - Current
"""


@pytest.fixture
def session():
    return analyze_resume(RESUME, analyzed_at="2026-10-19T09:00:00")


@pytest.mark.unit
class TestCreateBulletRecord:
    """Test create_bullet_record()."""

    def test_record_fields(self):
        record = create_bullet_record("•  Managed a team of   8 waiters", 0)
        assert record.original == "Managed a team of 8 waiters"
        assert record.fields.verb == "Managed"
        assert record.improved == "• Managed a team of 8 waiters."
        assert record.baseline_score == 75
        # 75 + field bonus 10 (verb, quantifier) + rewrite bonus 2
        assert record.improved_score == 87

    def test_ids_are_deterministic(self):
        first = create_bullet_record("• Led 3 launches", 2)
        second = create_bullet_record("• Led 3 launches", 2)
        assert first.id == second.id
        assert first.id.startswith("bullet-2-")
        assert bullet_id("Led 3 launches", 2) == first.id

    def test_update_fields_keeps_original_and_baseline(self):
        record = create_bullet_record("• Helped customers", 0)
        fields = BulletFields(verb="Resolved", task="40 customer tickets a day", impact="lift CSAT")
        updated = update_bullet_fields(record, fields)

        assert updated.original == record.original
        assert updated.baseline_score == record.baseline_score
        assert updated.fields == fields
        assert updated.improved == "• Resolved 40 customer tickets a day to lift CSAT."
        assert updated.improved_score > record.improved_score


@pytest.mark.unit
class TestAnalyzeResume:
    """Test analyze_resume() and the signal report."""

    def test_bullets_and_selection(self, session):
        assert [b.original for b in session.bullets] == [
            "Managed a team of 8 waiters",
            "Helped customers",
        ]
        assert session.selected_bullet_id == session.bullets[0].id
        assert session.selected_bullet is session.bullets[0]
        assert session.last_analyzed_at == "2026-10-19T09:00:00"
        assert session.resume_text == RESUME

    def test_signal_report(self, session):
        # baseline scores 75 and 40
        assert session.signal_report == SignalReport(visible=58, hidden=42, numbers=1, verbs=2)

    def test_empty_resume(self):
        result = analyze_resume("")
        assert result.bullets == ()
        assert result.selected_bullet_id is None
        assert result.signal_report == SignalReport()

    def test_none_text(self):
        result = analyze_resume(None)
        assert result.bullets == ()
        assert result.resume_text == ""

    def test_empty_report(self):
        assert build_signal_report([]) == SignalReport(visible=0, hidden=100, numbers=0, verbs=0)

    def test_deterministic(self):
        assert analyze_resume(RESUME) == analyze_resume(RESUME)


@pytest.mark.unit
class TestSelectionAndEdits:
    """Test select_bullet() and edit_selected()."""

    def test_select_bullet(self, session):
        second = session.bullets[1].id
        assert select_bullet(session, second).selected_bullet_id == second

    def test_select_unknown_id_is_noop(self, session):
        assert select_bullet(session, "missing") is session

    def test_edit_selected_only_touches_selected(self, session):
        session = select_bullet(session, session.bullets[1].id)
        fields = BulletFields(verb="Resolved", task="customer issues", quantifier="30")
        edited = edit_selected(session, fields)

        assert edited.bullets[0] == session.bullets[0]
        assert edited.bullets[1].fields == fields
        assert edited.bullets[1].improved == "• Resolved customer issues (30)."
        assert edited.bullets[1].original == "Helped customers"

    def test_edit_without_selection_is_noop(self):
        assert edit_selected(EMPTY_SESSION, BulletFields(verb="Led")) is EMPTY_SESSION


@pytest.mark.unit
class TestRestoreSession:
    """Test restore_session() sanitizing of stored data."""

    def test_restores_serialized_session(self, session):
        assert restore_session(session.to_dict()) == session

    @pytest.mark.parametrize("data", [None, "junk", 42, ["bullets"]])
    def test_non_mapping_gives_empty_session(self, data):
        assert restore_session(data) == EMPTY_SESSION

    def test_repairs_selection(self, session):
        data = session.to_dict()
        data["selectedBulletId"] = "gone"
        assert restore_session(data).selected_bullet_id == session.bullets[0].id

    def test_skips_invalid_bullets_and_fills_gaps(self):
        data = {
            "resumeText": 12,
            "bullets": ["junk", {"original": "Managed a team of 8 waiters", "fields": {"verb": 3}}],
            "lastAnalyzedAt": 5,
        }
        restored = restore_session(data)

        assert restored.resume_text == ""
        assert restored.last_analyzed_at is None
        assert len(restored.bullets) == 1

        bullet = restored.bullets[0]
        assert bullet.id.startswith("stored-bullet-1-")
        assert bullet.fields == BulletFields()
        assert bullet.improved == "Managed a team of 8 waiters"
        assert bullet.baseline_score == score_bullet("Managed a team of 8 waiters")
        assert bullet.improved_score == bullet.baseline_score
        assert restored.selected_bullet_id == bullet.id

    def test_rounds_stored_scores(self):
        bullet = restore_bullet(
            {"id": "b1", "original": "Helped customers", "baselineScore": 74.9, "improvedScore": 60.2}, 0
        )
        assert bullet.baseline_score == 75
        assert bullet.improved_score == 60

    def test_clamps_signal_report(self):
        report = restore_signal_report(
            {"visible": 150, "hidden": -5, "numbers": True, "verbs": 3.7}
        )
        assert report == SignalReport(visible=100, hidden=0, numbers=0, verbs=3)

    def test_signal_report_defaults(self):
        assert restore_signal_report({"visible": float("inf")}) == SignalReport()
        assert restore_signal_report({"visible": 30}) == SignalReport(visible=30, hidden=70)
