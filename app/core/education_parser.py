"""
Education parsing module for extracting education entries from resumes.

Provides deterministic, rule-based parsing of education lines: degree
detection against a fixed pattern set, field of study from a discipline
vocabulary, year-precision dates and an opaque CGPA string.
"""

import re
from typing import List, Optional

from app.core.schemas import EducationEntry


# Word-bounded so "ma" inside "Management" is not an M.A.
DEGREE_RE = re.compile(
    r"\b(?:B\.?\s?Tech|M\.?\s?Tech|B\.?Sc|M\.?Sc|B\.?Com|M\.?Com|BBA|MBA|BCA|MCA"
    r"|Ph\.?D|B\.?A|M\.?A|Bachelor(?:'s)?|Master(?:'s)?|Doctorate|ACA)\b\.?",
    re.IGNORECASE,
)

# Priority order: longer, more specific disciplines first.
FIELD_OF_STUDY_VOCABULARY = [
    "Computer Science",
    "Information Technology",
    "Electronics and Communication",
    "Electrical Engineering",
    "Mechanical Engineering",
    "Civil Engineering",
    "Business Administration",
    "Data Science",
    "Engineering",
    "Commerce",
    "Accounting",
    "Economics",
    "Finance",
    "Mathematics",
    "Physics",
    "Chemistry",
    "Management",
    "Science",
    "Arts",
]

INSTITUTION_KEYWORDS_RE = re.compile(r"\b(?:University|College|Institute|School|Academy)\b", re.IGNORECASE)

YEAR_RE = re.compile(r"\b\d{4}\b")
CGPA_RE = re.compile(r"\b(?:CGPA|GPA|Score)\b\s*[:\-]?\s*(\d+(?:\.\d+)?)", re.IGNORECASE)
SCORE_TOKEN_RE = re.compile(r"\b(?:CGPA|GPA|Score)\b", re.IGNORECASE)
FROM_FIRST_YEAR_RE = re.compile(r"\d{4}.*$")
EDGE_SEPARATORS = " \t,;:|-–—()"


def extract_degree(text: str) -> str:
    """
    Degree token with internal periods removed.

    Examples:
        "B.Tech Computer Science" -> "BTech"
        "MBA, 2020"               -> "MBA"
    """
    m = DEGREE_RE.search(text)
    if not m:
        return ""
    return m.group(0).replace(".", "").strip()


def extract_field_of_study(text: str) -> str:
    text_lower = text.lower()
    for field in FIELD_OF_STUDY_VOCABULARY:
        if re.search(rf"\b{re.escape(field.lower())}\b", text_lower):
            return field
    return ""


def extract_cgpa(text: str) -> Optional[str]:
    m = CGPA_RE.search(text)
    return m.group(1) if m else None


def extract_institution(text: str) -> str:
    """
    Institution name for an education line.

    Prefers the text before the degree token, then the line with the degree
    token and everything from the first year on removed, then the whole line.
    """
    m = DEGREE_RE.search(text)
    if m:
        before = text[:m.start()].strip(EDGE_SEPARATORS)
        if before:
            return before
        stripped = (text[:m.start()] + " " + text[m.end():])
    else:
        stripped = text
    stripped = FROM_FIRST_YEAR_RE.sub("", stripped)
    stripped = " ".join(stripped.split()).strip(EDGE_SEPARATORS)
    return stripped or text.strip()


def parse_education_entry(text: str, allow_institution_only: bool = False) -> Optional[EducationEntry]:
    """
    Parse one education line (or a joined buffer of lines).

    Returns None when nothing marks the text as education: no degree token,
    and, unless allow_institution_only is set, no institution keyword either.
    """
    text = " ".join(text.split())
    degree = extract_degree(text)
    if not degree:
        if not (allow_institution_only and INSTITUTION_KEYWORDS_RE.search(text)):
            return None

    years = YEAR_RE.findall(text)
    return EducationEntry(
        institution=extract_institution(text),
        degree=degree,
        field_of_study=extract_field_of_study(text),
        start_date=f"{years[0]}-01-01" if len(years) >= 1 else "",
        end_date=f"{years[1]}-12-31" if len(years) >= 2 else "",
        cgpa=extract_cgpa(text),
    )


def parse_education_strict(lines: List[str]) -> List[EducationEntry]:
    """Each line on its own; lines without a degree token are dropped."""
    entries: List[EducationEntry] = []
    for line in lines:
        entry = parse_education_entry(line)
        if entry is not None:
            entries.append(entry)
    return entries


def _closes_buffer(line: str) -> bool:
    return bool(YEAR_RE.search(line) or SCORE_TOKEN_RE.search(line))


def parse_education_loose(lines: List[str]) -> List[EducationEntry]:
    """
    Group lines into entries: buffer until a line carries a year or a
    CGPA/GPA/Score token, then parse the buffer as one entry.
    """
    entries: List[EducationEntry] = []
    buffer: List[str] = []

    def flush() -> None:
        if buffer:
            entry = parse_education_entry(" ".join(buffer), allow_institution_only=True)
            if entry is not None:
                entries.append(entry)
            buffer.clear()

    for line in lines:
        buffer.append(line)
        if _closes_buffer(line):
            flush()
    flush()
    return entries
