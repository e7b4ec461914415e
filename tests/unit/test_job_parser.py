"""Unit tests for job description section parsing."""

import pytest

from beacon.contexts.roles.job_parser import parse_sections, split_lines
from beacon.contexts.roles.section_patterns import (
    clean_heading_line,
    format_heading,
    match_section,
)


@pytest.mark.unit
class TestMatchSection:
    """Test heading recognition against the label table."""

    @pytest.mark.parametrize(
        "line,key",
        [
            ("Responsibilities:", "responsibilities"),
            ("2) Key Duties:", "responsibilities"),
            ("- What you will do", "responsibilities"),
            ("ABOUT THE ROLE", "purpose"),
            ("Preferred Qualifications", "qualifications"),
            ("Requirements & Skills", "requirements"),
            ("Skills & experience", "skills"),
            ("Technical Skills:", "skills"),
        ],
    )
    def test_matches(self, line, key):
        assert match_section(line)[0] == key

    @pytest.mark.parametrize("line", ["Own the roadmap", "5 years experience", "We value skills"])
    def test_non_headings(self, line):
        assert match_section(line) is None

    def test_returns_labels(self):
        key, labels = match_section("Overview")
        assert key == "purpose"
        assert labels[0] == "overview"


@pytest.mark.unit
def test_clean_heading_line():
    """Strips numbering and bullets."""
    assert clean_heading_line("2) Key Duties:") == "Key Duties:"
    assert clean_heading_line("  • 1. Skills") == "Skills"


@pytest.mark.unit
def test_format_heading():
    """Title-cases the cleaned line, falling back to the label."""
    assert format_heading("- what you will do:", "what you will do") == "What You Will Do"
    assert format_heading("key AWS duties", "key duties") == "Key AWS Duties"
    assert format_heading("1.", "overview") == "Overview"


@pytest.mark.unit
def test_split_lines():
    """Splits on LF and CRLF, trims, drops blanks."""
    assert split_lines("a\r\n\n  b  \n\t\nc") == ["a", "b", "c"]


@pytest.mark.unit
class TestParseSections:
    """Test parse_sections() segmentation."""

    def test_two_sections(self):
        post = parse_sections("Responsibilities:\nOwn the roadmap\nQualifications:\n5 years experience")
        assert [(s.key, s.heading, s.lines) for s in post.sections] == [
            ("responsibilities", "Responsibilities", ("Own the roadmap",)),
            ("qualifications", "Qualifications", ("5 years experience",)),
        ]

    def test_plain_lines_form_one_general_section(self):
        lines = ["We build tools", "You will ship features", "Work with designers", "Remote friendly", "Competitive pay"]
        post = parse_sections("\n".join(lines))
        assert len(post.sections) == 1
        assert post.sections[0].key == "general"
        assert post.sections[0].heading == ""
        assert post.sections[0].lines == tuple(lines)

    def test_preamble_goes_to_general(self):
        post = parse_sections("Acme is hiring\nResponsibilities\nShip features")
        assert [(s.key, s.lines) for s in post.sections] == [
            ("general", ("Acme is hiring",)),
            ("responsibilities", ("Ship features",)),
        ]

    def test_empty_sections_are_dropped(self):
        post = parse_sections("Overview\nResponsibilities\nShip features\nSkills")
        assert [s.key for s in post.sections] == ["responsibilities"]

    def test_headings_only_fall_back_to_general(self):
        post = parse_sections("Responsibilities:\nQualifications:")
        assert len(post.sections) == 1
        assert post.sections[0].key == "general"
        assert post.sections[0].lines == ("Responsibilities:", "Qualifications:")

    @pytest.mark.parametrize("text", ["", "   \n\n"])
    def test_empty_input(self, text):
        post = parse_sections(text)
        assert len(post.sections) == 1
        assert post.sections[0].key == "general"
        assert post.sections[0].lines == ()

    def test_repeated_key_opens_new_section(self):
        post = parse_sections("Skills\nPython\nResponsibilities\nShip\nTechnical Skills\nSQL")
        assert [s.key for s in post.sections] == ["skills", "responsibilities", "skills"]

    @pytest.mark.parametrize(
        "text",
        [
            (
                "Acme Corp\n\nAbout the role:\nBuild things\n  Requirements  \n- 3 years Python\n"
                "- SQL\nWhat you bring\nCuriosity\n"
            ),
            "Responsibilities:\nQualifications:",
            "1. Overview\nBuild things\n2) Key Duties:\nShip features\n3. Skills\nSQL",
            "Own the roadmap",
        ],
    )
    def test_lines_partition_non_heading_input(self, text):
        post = parse_sections(text)
        collected = [line for section in post.sections for line in section.lines]
        lines = split_lines(text)
        expected = [line for line in lines if match_section(line) is None] or lines
        assert collected == expected

    def test_keeps_input_text(self):
        text = "Overview\nBuild things"
        assert parse_sections(text).text == text
