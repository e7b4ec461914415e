"""Unit tests for role bullet drafting and experience mapping."""

import pytest

from beacon.contexts.roles.bullets import build_role_bullet, map_experience, relevant_experiences
from beacon.contexts.roles.data_structures import DetectedSkill, ExperienceMapping, RoleBulletDraft

PYTHON = DetectedSkill(key="python", id="py", label="Python", matches=("python",), frequency=1, confidence=1.0)


@pytest.mark.unit
class TestBuildRoleBullet:
    """Test build_role_bullet() assembly."""

    def test_full_draft(self):
        draft = RoleBulletDraft(verb="LED", what="the data team", how="hiring 3 analysts", impact="doubled output")
        assert build_role_bullet(draft) == "• Led the data team by hiring 3 analysts — doubled output."

    @pytest.mark.parametrize("how", ["by pairing daily", "Through weekly demos"])
    def test_keeps_existing_connector(self, how):
        bullet = build_role_bullet(RoleBulletDraft(verb="built", what="trust", how=how))
        assert bullet == f"• Built trust {how}."

    @pytest.mark.parametrize("impact", ["(2x output)", "— 2x output"])
    def test_keeps_existing_separator(self, impact):
        bullet = build_role_bullet(RoleBulletDraft(verb="built", what="a pipeline", impact=impact))
        assert bullet == f"• Built a pipeline {impact}."

    def test_collapses_whitespace(self):
        draft = RoleBulletDraft(verb="  shipped ", what="  v2\n of the   app", how="  ", impact="")
        assert build_role_bullet(draft) == "• Shipped v2 of the app."

    def test_what_without_verb(self):
        assert build_role_bullet(RoleBulletDraft(what="Owned the roadmap")) == "• Owned the roadmap."

    def test_blank_draft(self):
        assert build_role_bullet(RoleBulletDraft()) == ""
        assert build_role_bullet(RoleBulletDraft(verb=" ", what="\t", how="by x", impact="y")) == ""


@pytest.mark.unit
class TestMapExperience:
    """Test map_experience() normalization."""

    def test_defaults_and_evidence_split(self):
        experience = map_experience(PYTHON, "  Ported the ETL  ", evidence="Repo link\n\n  Talk slides \n")

        assert experience == ExperienceMapping(
            skill_key="python",
            skill_label="Python",
            title="Python",
            summary="Ported the ETL",
            evidence=("Repo link", "Talk slides"),
            impact="",
            confidence=3,
        )

    @pytest.mark.parametrize("confidence,expected", [(0, 3), (None, 3), (-2, 1), (9, 5), (4, 4)])
    def test_confidence_clamped(self, confidence, expected):
        assert map_experience(PYTHON, "Did it", confidence=confidence).confidence == expected

    def test_blank_summary(self):
        assert map_experience(PYTHON, "   ") is None

    def test_to_dict(self):
        data = map_experience(PYTHON, "Did it", title="ETL", impact="Saved 4h").to_dict()
        assert data == {
            "skillKey": "python",
            "skillLabel": "Python",
            "title": "ETL",
            "summary": "Did it",
            "evidence": [],
            "impact": "Saved 4h",
            "confidence": 3,
        }


@pytest.mark.unit
def test_relevant_experiences():
    """Only experiences for detected skills survive, order kept."""
    first = ExperienceMapping(skill_key="python", skill_label="Python", title="A", summary="a")
    other = ExperienceMapping(skill_key="design", skill_label="Design", title="B", summary="b")
    second = ExperienceMapping(skill_key="python", skill_label="Python", title="C", summary="c")

    assert relevant_experiences([first, other, second], [PYTHON]) == [first, second]
    assert relevant_experiences([first], []) == []
