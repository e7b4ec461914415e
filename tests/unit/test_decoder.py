"""Unit tests for role decoding helpers."""

import pytest

from beacon.contexts.roles.data_structures import (
    DetectedSkill,
    ExperienceMapping,
    ParsedJobPost,
    ParsedSection,
    RoleBulletDraft,
)
from beacon.contexts.roles.decoder import (
    calculate_fit_coverage,
    consolidate_text,
    decode_role,
    skill_contexts,
)

DICTIONARY = {
    "python": {"id": "py", "label": "Python", "keywords": ["python", "django"]},
    "cloud": {"id": "cl", "label": "Cloud", "keywords": ["aws", "docker"]},
    "design": {"id": "ds", "label": "Design", "keywords": ["figma"]},
}

JOB = """Overview:
We run Python services on AWS.

Responsibilities:
- Build Django APIs
- Ship Docker images to AWS
- Review python code

Qualifications:
3 years of Python
"""


def _skill(key, frequency, matches=()):
    return DetectedSkill(
        key=key, id=key, label=key.title(), matches=tuple(matches), frequency=frequency, confidence=1.0
    )


@pytest.mark.unit
def test_consolidate_text():
    """Lines joined by spaces across sections."""
    post = ParsedJobPost(
        sections=(
            ParsedSection(key="general", heading="", lines=("a", "b")),
            ParsedSection(key="skills", heading="Skills", lines=("c",)),
        ),
        text="",
    )
    assert consolidate_text(post) == "a b c"


@pytest.mark.unit
class TestSkillContexts:
    """Test skill_contexts() line collection."""

    def test_collects_distinct_lines_per_skill(self):
        post = ParsedJobPost(
            sections=(ParsedSection(key="general", heading="", lines=("Use AWS", "aws daily", "Use AWS", "Other")),),
            text="",
        )
        contexts = skill_contexts(post, [_skill("cloud", 3, ["aws"]), _skill("design", 0)])
        assert contexts == {"cloud": ("Use AWS", "aws daily"), "design": ()}

    def test_limit(self):
        lines = tuple(f"python line {i}" for i in range(12))
        post = ParsedJobPost(sections=(ParsedSection(key="general", heading="", lines=lines),), text="")
        contexts = skill_contexts(post, [_skill("python", 12, ["python"])])
        assert contexts["python"] == lines[:8]
        assert len(skill_contexts(post, [_skill("python", 12, ["python"])], limit=3)["python"]) == 3


@pytest.mark.unit
def test_calculate_fit_coverage():
    """Mean of frequency relative to the top skill."""
    assert calculate_fit_coverage([]) == 0.0
    assert calculate_fit_coverage([_skill("a", 4), _skill("b", 2), _skill("c", 2)]) == pytest.approx(2 / 3)
    assert calculate_fit_coverage([_skill("a", 5)]) == 1.0


@pytest.mark.unit
class TestDecodeRole:
    """Test decode_role() end to end."""

    def test_sections_and_skills(self):
        decoding = decode_role(JOB, DICTIONARY)

        assert [s.key for s in decoding.post.sections] == ["purpose", "responsibilities", "qualifications"]
        assert [(s.key, s.frequency) for s in decoding.skills] == [("python", 4), ("cloud", 3)]
        assert decoding.fit_coverage == pytest.approx((1 + 3 / 4) / 2)

    def test_contexts(self):
        decoding = decode_role(JOB, DICTIONARY)
        assert decoding.contexts["cloud"] == (
            "We run Python services on AWS.",
            "- Ship Docker images to AWS",
        )
        assert set(decoding.contexts) == {"python", "cloud"}

    def test_strips_surrounding_whitespace(self):
        decoding = decode_role("\n\n  Own the roadmap  \n\n", DICTIONARY)
        assert decoding.post.text == "Own the roadmap"
        assert decoding.skills == ()
        assert decoding.fit_coverage == 0.0

    def test_to_dict(self):
        data = decode_role(JOB, DICTIONARY).to_dict()
        assert data["fitCoverage"] == pytest.approx(0.875)
        assert data["skills"][0]["label"] == "Python"
        assert data["sections"][0]["heading"] == "Overview"
        assert data["generatedAt"]
        assert data["bullets"] == []
        assert data["experiences"] == []

    def test_experiences_filtered_to_detected_skills(self):
        kept = ExperienceMapping(skill_key="cloud", skill_label="Cloud", title="Infra", summary="Ran AWS")
        dropped = ExperienceMapping(skill_key="design", skill_label="Design", title="UI", summary="Drew")

        decoding = decode_role(JOB, DICTIONARY, experiences=[dropped, kept])

        assert decoding.experiences == (kept,)
        assert decoding.to_dict()["experiences"][0]["skillKey"] == "cloud"

    def test_drafts_become_bullets(self):
        drafts = [RoleBulletDraft(verb="built", what="Django APIs", how="through code review"), RoleBulletDraft()]
        decoding = decode_role(JOB, DICTIONARY, drafts=drafts)
        assert decoding.bullets == ("• Built Django APIs through code review.",)

    def test_generated_at(self):
        decoding = decode_role(JOB, DICTIONARY, generated_at="2026-10-19T09:30:00")
        assert decoding.to_dict()["generatedAt"] == "2026-10-19T09:30:00"
