"""
Date-range extraction for experience and education lines.

Tries a fixed list of range patterns in priority order and resolves the
matched tokens with dateutil. Never raises: anything unparseable comes back
as the empty string.
"""

import logging
import re
from datetime import datetime
from typing import Optional

from dateutil import parser as date_parser
from dateutil.parser import ParserError

from app.core.schemas import DateRange

logger = logging.getLogger(__name__)

PRESENT = "Present"
PRESENT_WORDS = {"present", "current", "ongoing"}

MONTH = (
    r"(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|aug(?:ust)?"
    r"|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)\.?"
)
MONTH_YEAR = rf"\b{MONTH}\s*,?\s*\d{{4}}\b"
YEAR = r"\b(?:19|20)\d{2}\b"
SEP = r"\s*(?:-|–|—|\bto\b)\s*"
PRESENT_TOKEN = r"\b(?:present|current|ongoing)\b"

# Order is precedence: the first pattern that matches wins.
DATE_RANGE_PATTERNS = [
    re.compile(rf"({MONTH_YEAR}){SEP}({PRESENT_TOKEN})", re.IGNORECASE),
    re.compile(rf"({YEAR}){SEP}({PRESENT_TOKEN})", re.IGNORECASE),
    re.compile(rf"({MONTH_YEAR}){SEP}({MONTH_YEAR})", re.IGNORECASE),
    re.compile(rf"({YEAR}){SEP}({YEAR})", re.IGNORECASE),
]
SINGLE_MONTH_YEAR_RE = re.compile(MONTH_YEAR, re.IGNORECASE)

# Missing day/month resolve to the first of January.
_DEFAULT_DATE = datetime(2000, 1, 1)


def resolve_date(token: str) -> str:
    """Resolve 'Jan 2023' / 'September 2021' / '2019' to YYYY-MM-DD, or ''."""
    t = token.strip().rstrip(".,")
    if not t:
        return ""
    try:
        return date_parser.parse(t, default=_DEFAULT_DATE).date().isoformat()
    except (ParserError, ValueError, OverflowError) as e:
        logger.debug(f"Could not resolve date token '{token}': {e}")
        return ""


def _resolve_end(token: str) -> str:
    if token.strip().lower() in PRESENT_WORDS:
        return PRESENT
    return resolve_date(token)


def find_date_range(text: str) -> Optional[re.Match]:
    for pattern in DATE_RANGE_PATTERNS:
        m = pattern.search(text or "")
        if m:
            return m
    return None


def has_date_range(text: str) -> bool:
    return find_date_range(text) is not None


def extract_date_range(text: str) -> DateRange:
    """
    Extract a start/end pair from a text fragment.

    Examples:
        "Jan 2023 – Present"      -> 2023-01-01 / Present
        "Aug 2021 - May 2022"     -> 2021-08-01 / 2022-05-01
        "2018 - 2022"             -> 2018-01-01 / 2022-01-01
        "Joined March 2020"       -> 2020-03-01 / ""
    """
    m = find_date_range(text)
    if m:
        return DateRange(start_date=resolve_date(m.group(1)), end_date=_resolve_end(m.group(2)))

    single = SINGLE_MONTH_YEAR_RE.search(text or "")
    if single:
        return DateRange(start_date=resolve_date(single.group(0)), end_date="")

    return DateRange()
