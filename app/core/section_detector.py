"""
Section boundary detection.

Labels header lines against a keyword lexicon and turns them into ordered,
contiguous SectionSpans. A section type with no matching header simply has
no span; its content slice is empty.
"""

import logging
import re
from typing import List, Mapping, Optional, Sequence, Tuple

from rapidfuzz import fuzz

from app.core.config import DEFAULT_SECTION_KEYWORDS, StrategySettings, STRICT_SETTINGS
from app.core.lines import is_bullet
from app.core.schemas import SectionSpan

logger = logging.getLogger(__name__)

WHITESPACE_RE = re.compile(r"\s+")
# "Languages: C++, Go" is a labelled value, not a header. "Skills:" still is.
LABEL_VALUE_RE = re.compile(r":\s*\S")


class SectionDetector:
    """
    Keyword/fuzzy header matcher.

    A line qualifies as a header for a keyword when it is an exact match, or
    contains the keyword and is at most `header_slack` characters longer, or
    scores above `fuzzy_threshold` on rapidfuzz's ratio. Exact matches over
    the whole lexicon are tried before containment, and containment before
    fuzzy, so "project experience" lands in projects rather than experience.
    """

    def __init__(
        self,
        lexicon: Mapping[str, Sequence[str]] = DEFAULT_SECTION_KEYWORDS,
        header_slack: int = STRICT_SETTINGS.header_slack,
        fuzzy_threshold: float = STRICT_SETTINGS.fuzzy_threshold,
        min_header_length: int = STRICT_SETTINGS.min_header_length,
    ):
        self.lexicon: Tuple[Tuple[str, Tuple[str, ...]], ...] = tuple(
            (section_type, tuple(k.lower() for k in keywords))
            for section_type, keywords in lexicon.items()
        )
        self.header_slack = header_slack
        self.fuzzy_threshold = fuzzy_threshold
        self.min_header_length = min_header_length

    @classmethod
    def from_settings(
        cls,
        settings: StrategySettings,
        lexicon: Mapping[str, Sequence[str]] = DEFAULT_SECTION_KEYWORDS,
    ) -> "SectionDetector":
        return cls(
            lexicon=lexicon,
            header_slack=settings.header_slack,
            fuzzy_threshold=settings.fuzzy_threshold,
            min_header_length=settings.min_header_length,
        )

    def is_header_candidate(self, line: str) -> bool:
        t = line.strip()
        if len(t) < self.min_header_length:
            return False
        if is_bullet(t) or t[0].isdigit():
            return False
        if LABEL_VALUE_RE.search(t):
            return False
        return True

    def classify(self, line: str) -> Optional[str]:
        """Section type for a header line, or None for body text."""
        if not self.is_header_candidate(line):
            return None
        key = WHITESPACE_RE.sub(" ", line.strip().lower())

        for section_type, keywords in self.lexicon:
            if key in keywords:
                return section_type

        for section_type, keywords in self.lexicon:
            for keyword in keywords:
                if keyword in key and len(key) <= len(keyword) + self.header_slack:
                    return section_type

        for section_type, keywords in self.lexicon:
            for keyword in keywords:
                if fuzz.ratio(key, keyword) > self.fuzzy_threshold:
                    return section_type

        return None

    def detect(self, lines: List[str]) -> List[SectionSpan]:
        starts: List[Tuple[int, str, str]] = []
        for idx, text in enumerate(lines):
            section_type = self.classify(text)
            if section_type:
                logger.debug(f"SECTION HEADER DETECTED at line {idx}: '{text.strip()}' -> section_type='{section_type}'")
                starts.append((idx, section_type, text.strip()))

        starts.sort(key=lambda s: s[0])
        spans: List[SectionSpan] = []
        for i, (start, section_type, header) in enumerate(starts):
            end = starts[i + 1][0] if i + 1 < len(starts) else len(lines)
            spans.append(SectionSpan(section_type=section_type, start_index=start, end_index=end, header_text=header))
        return spans


def find_section(spans: List[SectionSpan], section_type: str) -> Optional[SectionSpan]:
    """First span of a type. Later duplicates never bound content."""
    for span in spans:
        if span.section_type == section_type:
            return span
    return None


def get_section_content(spans: List[SectionSpan], lines: List[str], section_type: str) -> List[str]:
    """Interior lines of the first span of `section_type`, header excluded."""
    span = find_section(spans, section_type)
    if span is None:
        return []
    return [ln.strip() for ln in lines[span.start_index + 1:span.end_index] if ln.strip()]
