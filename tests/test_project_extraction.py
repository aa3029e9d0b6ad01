"""Tests for projects section parsing."""

from app.core.project_parser import extract_link, is_title_candidate, parse_projects


PIPE_PROJECTS = [
    "Resume Parser | Python, FastAPI | GitHub",
    "• Parsed 1,000 resumes a day",
    "• Added fuzzy header matching",
    "Portfolio Website | React, Tailwind | Live",
    "• Deployed on Vercel",
]


def test_pipe_separated_titles():
    projects = parse_projects(PIPE_PROJECTS)
    assert len(projects) == 2

    first, second = projects
    assert first.title == "Resume Parser"
    assert first.technologies == "Python, FastAPI"
    assert first.link == "GitHub"
    assert first.description == ["Parsed 1,000 resumes a day", "Added fuzzy header matching"]

    assert second.title == "Portfolio Website"
    assert second.technologies == "React, Tailwind"
    assert second.link == "Live"
    assert second.description == ["Deployed on Vercel"]


def test_plain_title_only_in_loose_mode():
    lines = ["Chess Engine", "• Minimax search with pruning"]
    assert parse_projects(lines) == []

    projects = parse_projects(lines, loose=True)
    assert len(projects) == 1
    assert projects[0].title == "Chess Engine"
    assert projects[0].technologies == ""
    assert projects[0].link is None
    assert projects[0].description == ["Minimax search with pruning"]


def test_link_only_line_attaches_to_previous_title():
    lines = [
        "Weather App | Flask",
        "GitHub: https://github.com/jane/weather",
        "• Shows a five-day forecast",
    ]
    projects = parse_projects(lines)
    assert len(projects) == 1
    assert projects[0].link == "https://github.com/jane/weather"
    assert projects[0].description == ["Shows a five-day forecast"]


def test_leading_live_word_is_part_of_title():
    projects = parse_projects(["Live Chat App | Socket.IO, Node"])
    assert projects[0].title == "Live Chat App"
    assert projects[0].technologies == "Socket.IO, Node"


def test_title_candidates():
    assert is_title_candidate("Tracker | Go")
    assert is_title_candidate("Budget App github.com/jane/budget")
    assert not is_title_candidate("• Built with React | Redux")
    assert not is_title_candidate("Chess Engine")
    assert is_title_candidate("Chess Engine", loose=True)


def test_extract_link_prefers_urls():
    assert extract_link("Demo | GitHub | https://demo.example.com") == "https://demo.example.com"
    assert extract_link("No links here") == ""


def test_bullets_before_any_title_are_ignored():
    assert parse_projects(["• orphan bullet"]) == []


def test_prose_mentioning_live_or_github_is_not_a_title():
    lines = [
        "Shop | Django",
        "Deployed a live demo for users",
        "Source hosted on GitHub for reviewers",
        "• Payments",
    ]
    projects = parse_projects(lines)
    assert len(projects) == 1
    assert projects[0].title == "Shop"
    assert projects[0].link is None
    assert projects[0].description == ["Payments"]


def test_link_markers_need_their_own_segment():
    assert not is_title_candidate("Built a live dashboard")
    assert is_title_candidate("Dashboard | D3 | Live Demo")
    assert extract_link("Dashboard | D3 | Live Demo") == "Live Demo"
    assert extract_link("Dashboard | GitHub:") == "GitHub"
