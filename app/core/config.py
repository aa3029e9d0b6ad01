"""
Static configuration for the extraction engine.

Keyword lexicons and strategy tunables live here so the matching code can be
exercised against arbitrary lexicons in tests.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, Mapping, Tuple


SectionType = Literal[
    "summary",
    "education",
    "experience",
    "articleship",
    "skills",
    "projects",
    "certifications",
    "languages",
    "hobbies",
]

# Lexicon order matters: within one acceptance rule the first section type wins.
DEFAULT_SECTION_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "summary": (
        "summary", "profile", "about", "objective", "career objective",
        "job objective", "profile summary", "professional summary",
    ),
    "education": (
        "education", "academic", "qualification", "educational background",
        "academic background",
    ),
    "experience": (
        "experience", "work experience", "employment", "professional experience",
        "career history", "work history",
    ),
    "articleship": ("articleship", "article assistant", "training", "internship"),
    "skills": (
        "skills", "technical skills", "core competencies", "competencies",
        "technologies", "expertise",
    ),
    "projects": ("projects", "key projects", "notable projects", "project experience"),
    "certifications": (
        "certifications", "certificates", "awards", "accolades", "achievements",
        "honors", "achievement", "position of responsibility",
        "achievements & position of responsibilities",
    ),
    "languages": ("languages", "language", "spoken languages", "language known"),
    "hobbies": ("hobbies", "interests", "personal interests", "activities"),
})


@dataclass(frozen=True)
class StrategySettings:
    """Tunables that differ between the strict and loose strategies."""
    header_slack: int
    fuzzy_threshold: float
    min_header_length: int = 3
    location_max_length: int = 20


STRICT_SETTINGS = StrategySettings(header_slack=10, fuzzy_threshold=90, location_max_length=20)
LOOSE_SETTINGS = StrategySettings(header_slack=15, fuzzy_threshold=85, location_max_length=30)

NAME_SCAN_WINDOW = 5
MAX_SKILL_LENGTH = 50
