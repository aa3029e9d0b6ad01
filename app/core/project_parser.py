"""
Projects section parsing.

A project starts at a title line: one with a '|' title/technology separator
or a link (strict), or any non-bullet line opening with a capital (loose).
Bullet lines under a title are its description. A GitHub/Live marker only
counts as a link when it is a '|' segment of its own.
"""

import re
from typing import Dict, List, Optional

from app.core.lines import is_bullet, strip_bullet
from app.core.schemas import ProjectEntry

TITLE_SEPARATOR = "|"

URL_RE = re.compile(r"(?:https?://|www\.)[^\s|]+|(?:github\.com|gitlab\.com)/[^\s|]+", re.IGNORECASE)
LINK_MARKER_RE = re.compile(r"^(?:GitHub|Live)(?: (?:Demo|Link|Repo|Site))?:?$")
# Only trailing markers are stripped from a title, so "Live Chat App" survives.
TRAILING_MARKERS_RE = re.compile(r"(?:\s*[-–—,:]?\s*\b(?:GitHub|Live)\b[^\s|]*)+\s*$")
EDGE_SEPARATORS = " \t,;:|-–—()"


def _segments(line: str) -> List[str]:
    return [s.strip() for s in line.split(TITLE_SEPARATOR)]


def _is_marker(segment: str) -> bool:
    return bool(LINK_MARKER_RE.match(segment.strip(" \t-–—()")))


def has_link_marker(line: str) -> bool:
    return bool(URL_RE.search(line)) or any(_is_marker(s) for s in _segments(line)[1:])


def extract_link(line: str) -> str:
    """First URL on the line, else the first GitHub/Live marker segment."""
    m = URL_RE.search(line)
    if m:
        return m.group(0)
    for segment in _segments(line)[1:]:
        if _is_marker(segment):
            return segment.strip(EDGE_SEPARATORS)
    return ""


def _remove_links(text: str) -> str:
    text = URL_RE.sub("", text)
    kept = [s for s in _segments(text) if not _is_marker(s)]
    return " ".join(" ".join(kept).split()).strip(EDGE_SEPARATORS)


def _clean_title(text: str) -> str:
    text = URL_RE.sub("", text)
    text = TRAILING_MARKERS_RE.sub("", text)
    return " ".join(text.split()).strip(EDGE_SEPARATORS)


def is_title_candidate(line: str, loose: bool = False) -> bool:
    if is_bullet(line):
        return False
    if TITLE_SEPARATOR in line or has_link_marker(line):
        return True
    return loose and line[:1].isupper()


def parse_projects(lines: List[str], loose: bool = False) -> List[ProjectEntry]:
    projects: List[ProjectEntry] = []
    current: Optional[Dict] = None

    def close_current() -> None:
        if current is not None:
            projects.append(ProjectEntry(
                title=current["title"],
                technologies=current["technologies"],
                link=current["link"] or None,
                description=current["description"],
            ))

    for line in lines:
        if is_title_candidate(line, loose=loose):
            parts = line.split(TITLE_SEPARATOR)
            title = _clean_title(parts[0])
            technologies = _remove_links(parts[1]) if len(parts) > 1 else ""
            link = extract_link(line)

            # "GitHub: github.com/x/y" under a title belongs to that title
            link_only = not _remove_links(line)
            if link_only and current is not None and not current["description"]:
                if not current["link"]:
                    current["link"] = link
                continue

            close_current()
            current = {"title": title, "technologies": technologies, "link": link, "description": []}
        elif current is not None and is_bullet(line):
            text = strip_bullet(line)
            if text:
                current["description"].append(text)

    close_current()
    return projects
