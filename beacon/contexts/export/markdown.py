"""
Markdown rendering for resume sessions and role decodings.

Templates live in beacon/contexts/export/templates/. Sections without a
heading (the fallback "general" section) render under "General".
"""

from functools import lru_cache
from typing import Iterable

from beacon.contexts.export.template_registry import ExportTemplateRegistry
from beacon.contexts.resume.data_structures import ResumeSession
from beacon.contexts.resume.scoring import score_label
from beacon.contexts.roles.bullets import relevant_experiences
from beacon.contexts.roles.data_structures import ExperienceMapping, RoleDecoding
from beacon.utils.timestamp import display_timestamp, now

UNTITLED_SECTION_HEADING = "General"


@lru_cache(maxsize=1)
def _registry() -> ExportTemplateRegistry:
    return ExportTemplateRegistry()


def render_resume_markdown(session: ResumeSession, generated_at: str = None) -> str:
    """
    Render a resume session as a Markdown report.

    Args:
        session: Analyzed ResumeSession
        generated_at: ISO timestamp for the header (defaults to now)

    Returns:
        Markdown text ending in a newline
    """
    bullets = [
        {"bullet": bullet, "label": score_label(bullet.improved_score).label}
        for bullet in session.bullets
    ]
    return _registry().get_template("resume").render(
        generated_at=display_timestamp(generated_at or now()),
        report=session.signal_report,
        bullets=bullets,
    )


def render_role_markdown(
    decoding: RoleDecoding,
    generated_at: str = None,
    experiences: Iterable[ExperienceMapping] = None,
) -> str:
    """
    Render a role decoding as a Markdown snapshot.

    Order: ranked skills, mapped experiences, generated bullets, then every
    parsed section with its lines.

    Args:
        decoding: RoleDecoding from decode_role()
        generated_at: ISO timestamp for the header (defaults to the decoding's own)
        experiences: Replaces decoding.experiences; filtered to detected skills
    """
    if experiences is None:
        experiences = decoding.experiences
    else:
        experiences = relevant_experiences(experiences, decoding.skills)

    sections = [
        {"heading": section.heading or UNTITLED_SECTION_HEADING, "lines": section.lines}
        for section in decoding.post.sections
    ]
    return _registry().get_template("role").render(
        generated_at=display_timestamp(generated_at or decoding.generated_at or now()),
        decoding=decoding,
        experiences=experiences,
        sections=sections,
    )
