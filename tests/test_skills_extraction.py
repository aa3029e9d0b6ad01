"""Tests for the list-shaped sections: skills, languages, hobbies, certifications."""

from app.core.list_parsers import (
    parse_certifications,
    parse_hobbies,
    parse_languages,
    parse_skills,
    parse_summary,
    split_items,
)


def test_label_prefix_is_dropped():
    """'Languages: C++, Python, Go' yields the tools, not the label."""
    skills = parse_skills(["Languages: C++, Python, Go"])
    assert "C++" in skills
    assert "Python" in skills
    assert "Go" in skills
    assert "Languages" not in skills


def test_skills_split_on_pipes_and_bullets():
    skills = parse_skills(["Frameworks: Django | React", "• Kubernetes • Terraform"])
    assert skills == ["Django", "React", "Kubernetes", "Terraform"]


def test_skills_deduplication():
    skills = parse_skills(["Python, JavaScript", "Tools: Docker, Python", "JavaScript"])
    assert skills == ["Python", "JavaScript", "Docker"]
    assert len(skills) == len(set(skills))


def test_prose_length_tokens_dropped():
    long_token = "Comfortable working across the entire stack from UI to infra"
    skills = parse_skills([f"SQL, {long_token}"])
    assert skills == ["SQL"]


def test_hyphenated_skills_stay_whole():
    assert split_items("Front-end, Back-end") == ["Front-end", "Back-end"]


def test_languages_keep_duplicates():
    assert parse_languages(["English, Hindi", "English"]) == ["English", "Hindi", "English"]


def test_hobbies():
    assert parse_hobbies(["Chess | Hiking", "• Photography"]) == ["Chess", "Hiking", "Photography"]


def test_certifications_from_bullets_and_long_lines():
    certs = parse_certifications([
        "• AWS Certified Solutions Architect",
        "Short",
        "Winner of Smart India Hackathon 2022",
    ])
    assert [c.name for c in certs] == ["AWS Certified Solutions Architect", "Winner of Smart India Hackathon 2022"]
    assert all(c.issuer == "" and c.date == "" for c in certs)


def test_summary_joins_lines():
    assert parse_summary(["Backend engineer", "focused on data."]) == "Backend engineer focused on data."


def test_empty_sections():
    assert parse_skills([]) == []
    assert parse_languages([]) == []
    assert parse_certifications([]) == []
    assert parse_summary([]) == ""


def test_every_bullet_glyph_splits_items():
    assert split_items("Python * Go ‣ Rust") == ["Python", "Go", "Rust"]
    assert split_items("C++, C#") == ["C++", "C#"]
