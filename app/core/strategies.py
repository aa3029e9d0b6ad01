"""
Resume extraction strategies.

Both strategies share the line normalizer, the contact/name extractors and
the list-section parsers. They differ in how tightly headers are matched and
how records are delimited inside the experience, education and projects
sections.
"""

import logging
from typing import Dict, List, Mapping, NamedTuple, Sequence, Type

from app.core.config import DEFAULT_SECTION_KEYWORDS, LOOSE_SETTINGS, STRICT_SETTINGS, StrategySettings
from app.core.contact_extractor import extract_contact_info, extract_name
from app.core.education_parser import parse_education_loose, parse_education_strict
from app.core.experience_parser import parse_experience_loose, parse_experience_strict
from app.core.lines import normalize_lines
from app.core.list_parsers import (
    parse_certifications,
    parse_hobbies,
    parse_languages,
    parse_skills,
    parse_summary,
)
from app.core.project_parser import parse_projects
from app.core.resume_assembler import assemble_record
from app.core.schemas import (
    EducationEntry,
    ExperienceEntry,
    Line,
    ProjectEntry,
    ResumeRecord,
    SectionSpan,
    StrategyName,
)
from app.core.section_detector import SectionDetector, get_section_content

logger = logging.getLogger(__name__)


class ExtractionResult(NamedTuple):
    record: ResumeRecord
    spans: List[SectionSpan]
    lines: List[Line]
    strategy: StrategyName


class ExtractionStrategy:
    """Text in, ResumeRecord out. Subclasses supply the record-boundary heuristics."""

    name: StrategyName
    settings: StrategySettings

    def __init__(self, lexicon: Mapping[str, Sequence[str]] = DEFAULT_SECTION_KEYWORDS):
        self.detector = SectionDetector.from_settings(self.settings, lexicon)

    def detect_sections(self, lines: List[str]) -> List[SectionSpan]:
        return self.detector.detect(lines)

    def parse_experience(self, lines: List[str]) -> List[ExperienceEntry]:
        raise NotImplementedError

    def parse_education(self, lines: List[str]) -> List[EducationEntry]:
        raise NotImplementedError

    def parse_projects(self, lines: List[str]) -> List[ProjectEntry]:
        raise NotImplementedError

    def extract(self, text: str) -> ExtractionResult:
        lines = normalize_lines(text)
        texts = [ln.text for ln in lines]
        spans = self.detect_sections(texts)
        if not spans:
            logger.warning(f"[{self.name}] No section headers detected in {len(texts)} lines")

        def section(section_type: str) -> List[str]:
            return get_section_content(spans, texts, section_type)

        # Internship/articleship entries follow the regular work history.
        work_experience = self.parse_experience(section("experience")) + self.parse_experience(section("articleship"))

        record = assemble_record(
            name=extract_name(texts, detector=self.detector),
            contact=extract_contact_info(text),
            summary=parse_summary(section("summary")),
            education=self.parse_education(section("education")),
            work_experience=work_experience,
            skills=parse_skills(section("skills")),
            projects=self.parse_projects(section("projects")),
            certifications=parse_certifications(section("certifications")),
            languages=parse_languages(section("languages")),
            hobbies=parse_hobbies(section("hobbies")),
        )
        logger.debug(
            f"[{self.name}] sections={[s.section_type for s in spans]} "
            f"experience={len(record.work_experience)} education={len(record.education)} "
            f"projects={len(record.projects)} skills={len(record.skills)}"
        )
        return ExtractionResult(record=record, spans=spans, lines=lines, strategy=self.name)


class StrictStrategy(ExtractionStrategy):
    """Tight header matching; position-based record boundaries."""

    name = "strict"
    settings = STRICT_SETTINGS

    def parse_experience(self, lines: List[str]) -> List[ExperienceEntry]:
        return parse_experience_strict(lines, location_max_length=self.settings.location_max_length)

    def parse_education(self, lines: List[str]) -> List[EducationEntry]:
        return parse_education_strict(lines)

    def parse_projects(self, lines: List[str]) -> List[ProjectEntry]:
        return parse_projects(lines, loose=False)


class LooseStrategy(ExtractionStrategy):
    """Broad header matching; date tokens and buffers delimit records."""

    name = "loose"
    settings = LOOSE_SETTINGS

    def parse_experience(self, lines: List[str]) -> List[ExperienceEntry]:
        return parse_experience_loose(lines, location_max_length=self.settings.location_max_length)

    def parse_education(self, lines: List[str]) -> List[EducationEntry]:
        return parse_education_loose(lines)

    def parse_projects(self, lines: List[str]) -> List[ProjectEntry]:
        return parse_projects(lines, loose=True)


STRATEGIES: Dict[str, Type[ExtractionStrategy]] = {
    "strict": StrictStrategy,
    "loose": LooseStrategy,
}


def get_strategy(name: str) -> ExtractionStrategy:
    try:
        return STRATEGIES[name]()
    except KeyError:
        raise ValueError(f"Unknown extraction strategy: {name!r} (expected one of {sorted(STRATEGIES)})")
