"""
Work-experience parsing.

Two heuristics over the lines of an experience section:

Strict: a date-range line anchors a job. The line above it is the company,
the line below is the position, and a short line after that is the location.
Bullets collect onto the open job until the next anchor.

Loose: scan for a plain line whose *next* line is a date range. That pair
opens a job; position, location and the run of bullets after it are
consumed greedily and the scan resumes past them.
"""

import logging
import re
from typing import Dict, List, Optional

from app.core.config import LOOSE_SETTINGS, STRICT_SETTINGS
from app.core.date_range import extract_date_range, find_date_range, has_date_range
from app.core.lines import LineCursor, is_bullet, strip_bullet
from app.core.schemas import ExperienceEntry

logger = logging.getLogger(__name__)

# Lookahead offsets relative to the anchor (date) line.
COMPANY_OFFSET = -1
POSITION_OFFSET = 1
LOCATION_OFFSET = 2

# "Freelance Work" style line: ends bullet collection without opening a job.
EMPLOYER_BREAK_RE = re.compile(r"^[A-Z][a-z]*(?:\s+[A-Za-z][a-z]*)*$")
EMPLOYER_BREAK_MAX_LENGTH = 30

YEAR_TOKEN_RE = re.compile(r"\d{4}")
DATE_LEFTOVER_STRIP = " \t|,;:-–—()"


def _is_anchor(line: Optional[str]) -> bool:
    return line is not None and not is_bullet(line) and has_date_range(line)


def _text_around_date(line: str) -> str:
    """'Google | Jan 2020 - Present' -> 'Google'."""
    m = find_date_range(line)
    if not m:
        return ""
    left = line[:m.start()].strip(DATE_LEFTOVER_STRIP)
    right = line[m.end():].strip(DATE_LEFTOVER_STRIP)
    return left or right


def _build_entry(company: str, position: str, location: Optional[str], date_line: str, bullets: List[str]) -> ExperienceEntry:
    dates = extract_date_range(date_line)
    return ExperienceEntry(
        company=company.strip(),
        position=position.strip(),
        location=location.strip() if location else None,
        start_date=dates.start_date,
        end_date=dates.end_date,
        description=list(bullets),
    )


def parse_experience_strict(
    lines: List[str],
    location_max_length: int = STRICT_SETTINGS.location_max_length,
) -> List[ExperienceEntry]:
    entries: List[ExperienceEntry] = []
    current: Optional[Dict] = None
    collecting = False
    consumed_until = -1
    cursor = LineCursor(lines)

    def close_current() -> None:
        if current is not None:
            entries.append(_build_entry(**current))

    while not cursor.at_end:
        line = cursor.current

        if _is_anchor(line):
            close_current()

            company = ""
            prev = cursor.peek(COMPANY_OFFSET)
            if prev is not None and cursor.pos - 1 > consumed_until and not is_bullet(prev) and not _is_anchor(prev):
                company = prev
            if not company:
                company = _text_around_date(line)

            position = ""
            location = None
            consumed = 0
            pos_line = cursor.peek(POSITION_OFFSET)
            # A line directly followed by another anchor is that anchor's company.
            if pos_line is not None and not is_bullet(pos_line) and not _is_anchor(pos_line) \
                    and not _is_anchor(cursor.peek(POSITION_OFFSET + 1)):
                position = pos_line
                consumed = POSITION_OFFSET
                loc_line = cursor.peek(LOCATION_OFFSET)
                if loc_line is not None and not is_bullet(loc_line) and len(loc_line) < location_max_length \
                        and not _is_anchor(loc_line) and not _is_anchor(cursor.peek(LOCATION_OFFSET + 1)):
                    location = loc_line
                    consumed = LOCATION_OFFSET

            logger.debug(f"Experience anchor '{line}': company='{company}', position='{position}', location='{location}'")
            current = {"company": company, "position": position, "location": location, "date_line": line, "bullets": []}
            collecting = True
            consumed_until = cursor.pos + consumed
            cursor.advance(consumed + 1)
            continue

        if current is not None and collecting:
            bullets = current["bullets"]
            if is_bullet(line):
                text = strip_bullet(line)
                if text:
                    bullets.append(text)
            elif _is_anchor(cursor.peek(1)):
                pass  # next job's company line
            elif EMPLOYER_BREAK_RE.match(line) and len(line) < EMPLOYER_BREAK_MAX_LENGTH:
                collecting = False
            elif bullets:
                # wrapped continuation of the previous bullet
                bullets[-1] = f"{bullets[-1]} {line}"

        cursor.advance()

    close_current()
    return entries


def _opens_job(cursor: LineCursor, offset: int) -> bool:
    """True if the line at `offset` is a company line or date line of a new job."""
    return _is_anchor(cursor.peek(offset)) or _is_anchor(cursor.peek(offset + 1))


def parse_experience_loose(
    lines: List[str],
    location_max_length: int = LOOSE_SETTINGS.location_max_length,
) -> List[ExperienceEntry]:
    entries: List[ExperienceEntry] = []
    cursor = LineCursor(lines)

    while not cursor.at_end:
        line = cursor.current
        date_line = cursor.peek(1)

        is_company_candidate = not is_bullet(line) and not YEAR_TOKEN_RE.search(line) and len(line) > 2
        if not (is_company_candidate and _is_anchor(date_line)):
            cursor.advance()
            continue

        company = line
        cursor.advance(2)

        position = ""
        location = None
        candidate = cursor.current
        if candidate is not None and not is_bullet(candidate) and not _opens_job(cursor, 0):
            position = candidate
            cursor.advance()
            candidate = cursor.current
            if candidate is not None and not is_bullet(candidate) and len(candidate) < location_max_length \
                    and not _opens_job(cursor, 0):
                location = candidate
                cursor.advance()

        bullets: List[str] = []
        while cursor.current is not None and is_bullet(cursor.current):
            text = strip_bullet(cursor.current)
            if text:
                bullets.append(text)
            cursor.advance()

        logger.debug(f"Loose experience entry: company='{company}', position='{position}', bullets={len(bullets)}")
        entries.append(_build_entry(company, position, location, date_line, bullets))

    return entries
