import logging
import re
from typing import Dict, List, Optional

from app.core.config import NAME_SCAN_WINDOW
from app.core.section_detector import SectionDetector

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")

# Tried in order; the first pattern with a hit wins.
PHONE_PATTERNS = [
    re.compile(r"\+91[-\s]?[6-9]\d{9}"),  # Indian mobile with country code
    re.compile(r"\+\d{1,3}[-\s]?\d{8,15}"),  # generic international
    re.compile(r"(?<!\d)\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}(?!\d)"),  # (555) 123-4567
]

LINKEDIN_RE = re.compile(r"(?:https?://)?(?:www\.)?linkedin\.com/[^\s|\]]+", re.IGNORECASE)
GITHUB_RE = re.compile(r"(?:https?://)?(?:www\.)?github\.com/[^\s|\]]+", re.IGNORECASE)

NAME_REJECT_RE = re.compile(r"[@+\d]|\b(?:resume|cv|curriculum)\b", re.IGNORECASE)


def _first(pattern: re.Pattern, text: str) -> str:
    m = pattern.search(text or "")
    return m.group(0) if m else ""


def extract_phone(text: str) -> str:
    for pattern in PHONE_PATTERNS:
        phone = _first(pattern, text)
        if phone:
            return phone
    return ""


def extract_contact_info(text: str) -> Dict[str, str]:
    """
    Pull contact channels out of the raw (unsplit) resume text.
    Every key is always present; a miss is the empty string.
    """
    return {
        "email": _first(EMAIL_RE, text),
        "phone": extract_phone(text),
        "linkedin": _first(LINKEDIN_RE, text),
        "github": _first(GITHUB_RE, text),
    }


def _is_title_cased(word: str) -> bool:
    return word[0].isupper() and word[1:] == word[1:].lower()


def looks_like_name(line: str) -> bool:
    t = line.strip()
    if len(t) < 3 or len(t) > 50:
        return False
    if NAME_REJECT_RE.search(t):
        return False
    words = t.split()
    if not 2 <= len(words) <= 4:
        return False
    return all(_is_title_cased(w) for w in words)


def extract_name(
    lines: List[str],
    window: int = NAME_SCAN_WINDOW,
    detector: Optional[SectionDetector] = None,
) -> str:
    """
    Candidate name from the top of the resume.

    Accepts the first line in the window with 2-4 title-cased words and no
    digits, '@', '+', or resume keywords. Lines the detector reads as
    section headers are skipped. Falls back to the first line verbatim so a
    (possibly wrong) name is always produced.
    """
    detector = detector or SectionDetector()
    for line in lines[:window]:
        if looks_like_name(line) and not detector.classify(line):
            return line.strip()

    if lines:
        logger.debug(f"No name-like line in first {window} lines, using first line: '{lines[0]}'")
        return lines[0].strip()
    return ""
