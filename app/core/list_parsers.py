"""Parsers for the list-shaped sections: skills, languages, hobbies, certifications, summary."""

import re
from typing import List

from app.core.config import MAX_SKILL_LENGTH
from app.core.lines import BULLET_CHARS, is_bullet, strip_bullet
from app.core.schemas import CertificationEntry

# Split on commas, pipes and bullet glyphs. Hyphens stay: "Front-end".
ITEM_SPLIT_RE = re.compile("[,|" + re.escape(BULLET_CHARS.replace("-", "")) + "]+")
LABEL_RE = re.compile(r"^[^:]{1,40}:\s*(.*)$")

CERTIFICATION_MIN_LENGTH = 10


def split_items(line: str) -> List[str]:
    """
    Tokens of one list line. A 'Label:' prefix is dropped.

    Example:
        "Languages: C++, Python, Go" -> ["C++", "Python", "Go"]
    """
    text = strip_bullet(line) if is_bullet(line) else line.strip()
    m = LABEL_RE.match(text)
    if m:
        text = m.group(1)
    return [t.strip() for t in ITEM_SPLIT_RE.split(text) if t.strip()]


def parse_skills(lines: List[str], max_length: int = MAX_SKILL_LENGTH) -> List[str]:
    """Split, drop prose-length tokens, dedupe in first-seen order."""
    skills: List[str] = []
    seen = set()
    for line in lines:
        for token in split_items(line):
            if len(token) > max_length or token in seen:
                continue
            seen.add(token)
            skills.append(token)
    return skills


def parse_languages(lines: List[str]) -> List[str]:
    return [token for line in lines for token in split_items(line)]


def parse_hobbies(lines: List[str]) -> List[str]:
    return [token for line in lines for token in split_items(line)]


def parse_certifications(lines: List[str]) -> List[CertificationEntry]:
    """Any bullet line or reasonably long line is a certification/achievement."""
    out: List[CertificationEntry] = []
    for line in lines:
        if not (is_bullet(line) or len(line.strip()) > CERTIFICATION_MIN_LENGTH):
            continue
        name = strip_bullet(line)
        if name:
            out.append(CertificationEntry(name=name))
    return out


def parse_summary(lines: List[str]) -> str:
    return " ".join(line.strip() for line in lines if line.strip())
