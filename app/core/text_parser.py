import logging
from typing import Any, Dict, List

from app.core.resume_assembler import count_populated_fields, grade_parse_quality
from app.core.schemas import DetectedSection, ParseResponse, ResumeRecord
from app.core.strategies import ExtractionResult, get_strategy

logger = logging.getLogger(__name__)

EXTRACTION_MODES = ("strict", "loose", "auto")


def extract_with_mode(text: str, mode: str = "strict") -> ExtractionResult:
    """
    Run one strategy, or both for mode="auto".

    Auto keeps whichever record has more populated fields; strict wins ties.
    """
    if not isinstance(text, str):
        raise TypeError(f"Resume text must be a str, got {type(text).__name__}")
    if mode not in EXTRACTION_MODES:
        raise ValueError(f"Unknown extraction mode: {mode!r} (expected one of {EXTRACTION_MODES})")

    if mode != "auto":
        return get_strategy(mode).extract(text)

    strict = get_strategy("strict").extract(text)
    loose = get_strategy("loose").extract(text)
    strict_score = count_populated_fields(strict.record)
    loose_score = count_populated_fields(loose.record)
    logger.debug(f"Auto mode: strict={strict_score} populated fields, loose={loose_score}")
    return loose if loose_score > strict_score else strict


def parse_resume_record(text: str, mode: str = "strict") -> ResumeRecord:
    return extract_with_mode(text, mode).record


def parse_resume(text: str, mode: str = "strict") -> Dict[str, Any]:
    """
    Parse resume text into the sparse camelCase record.

    Fields with no recovered value are absent rather than empty.
    """
    return parse_resume_record(text, mode).to_sparse_dict()


def _detected_sections(result: ExtractionResult) -> List[DetectedSection]:
    return [
        DetectedSection(
            section_type=span.section_type,
            header_text=span.header_text,
            locator=result.lines[span.start_index].locator,
            line_count=span.end_index - span.start_index - 1,
        )
        for span in result.spans
    ]


def parse_text_to_response(text: str, mode: str = "strict") -> ParseResponse:
    """Parse plain text and wrap the record with section evidence for the API."""
    result = extract_with_mode(text, mode)
    record = result.record

    warnings: List[str] = []
    if not result.spans:
        warnings.append("No section headers detected. Only contact fields and name were extracted.")
    if not record.email:
        warnings.append("Could not extract email.")
    if not record.phone:
        warnings.append("Could not extract phone number.")

    return ParseResponse(
        resume=record.to_sparse_dict(),
        mode=result.strategy,
        sections=_detected_sections(result),
        parse_quality=grade_parse_quality(record),
        warnings=warnings,
    )
