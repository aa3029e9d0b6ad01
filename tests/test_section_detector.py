"""
Tests for section header detection and section content slicing.
"""

from app.core.config import LOOSE_SETTINGS
from app.core.lines import normalize_lines
from app.core.section_detector import SectionDetector, get_section_content


# ===== HEADER CLASSIFICATION =====

def test_exact_headers():
    detector = SectionDetector()
    assert detector.classify("EDUCATION") == "education"
    assert detector.classify("  Work Experience  ") == "experience"
    assert detector.classify("Technical Skills") == "skills"
    assert detector.classify("Hobbies") == "hobbies"


def test_exact_match_beats_containment():
    """'Project Experience' is a projects header even though it contains 'experience'."""
    assert SectionDetector().classify("Project Experience") == "projects"


def test_short_annotated_header_within_slack():
    assert SectionDetector().classify("Education Details") == "education"
    loose = SectionDetector.from_settings(LOOSE_SETTINGS)
    assert loose.classify("Education (2019–2023)") == "education"


def test_fuzzy_header_tolerates_typos():
    assert SectionDetector().classify("Skils") == "skills"
    assert SectionDetector().classify("Certifcations") == "certifications"


def test_body_text_is_not_a_header():
    detector = SectionDetector()
    assert detector.classify("I have extensive experience leading engineering teams") is None
    assert detector.classify("Jane Doe") is None


def test_bullets_digits_and_short_lines_are_never_headers():
    detector = SectionDetector()
    assert detector.classify("• Skills") is None
    assert detector.classify("2019 Education") is None
    assert detector.classify("Go") is None


def test_custom_lexicon():
    detector = SectionDetector(lexicon={"certifications": ("honours",)})
    assert detector.classify("Honours") == "certifications"
    assert detector.classify("Education") is None


# ===== SPANS AND CONTENT =====

def test_spans_are_sorted_and_contiguous():
    lines = ["Jane Doe", "EDUCATION", "B.Tech Computer Science 2018 2022", "SKILLS", "Python, Go"]
    spans = SectionDetector().detect(lines)

    assert [(s.section_type, s.start_index, s.end_index) for s in spans] == [
        ("education", 1, 3),
        ("skills", 3, 5),
    ]
    assert spans[0].header_text == "EDUCATION"


def test_empty_section_between_headers():
    """EDUCATION followed by a blank line then SKILLS: empty education content, no crash."""
    lines = [ln.text for ln in normalize_lines("EDUCATION\n\nSKILLS\nPython")]
    spans = SectionDetector().detect(lines)

    assert get_section_content(spans, lines, "education") == []
    assert get_section_content(spans, lines, "skills") == ["Python"]


def test_absent_section_is_empty():
    lines = ["Jane Doe", "SKILLS", "Python"]
    spans = SectionDetector().detect(lines)
    assert get_section_content(spans, lines, "projects") == []


def test_first_span_of_a_type_wins():
    lines = ["SKILLS", "Python", "EXPERIENCE", "Acme", "Skills", "Go"]
    spans = SectionDetector().detect(lines)

    assert len([s for s in spans if s.section_type == "skills"]) == 2
    assert get_section_content(spans, lines, "skills") == ["Python"]


def test_content_never_includes_header_lines():
    lines = ["SUMMARY", "Engineer", "SKILLS", "Skills", "Python", "HOBBIES", "Chess"]
    spans = SectionDetector().detect(lines)
    headers = {s.header_text for s in spans}

    for section_type in ("summary", "skills", "hobbies"):
        content = get_section_content(spans, lines, section_type)
        assert not headers.intersection(content)


def test_labelled_value_lines_are_not_headers():
    strict = SectionDetector()
    loose = SectionDetector.from_settings(LOOSE_SETTINGS)
    assert strict.classify("Languages: C++, Go") is None
    assert loose.classify("Technologies: React, Node") is None
    assert strict.classify("Skills:") == "skills"
