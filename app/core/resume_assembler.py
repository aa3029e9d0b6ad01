from typing import Dict, List

from app.core.schemas import (
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    ParseQuality,
    ProjectEntry,
    ResumeRecord,
)

HIGH_QUALITY_FIELDS = 8
MEDIUM_QUALITY_FIELDS = 4


def derive_job_roles(work_experience: List[ExperienceEntry]) -> List[str]:
    return [exp.position.strip() for exp in work_experience if exp.position and exp.position.strip()]


def assemble_record(
    name: str,
    contact: Dict[str, str],
    summary: str,
    education: List[EducationEntry],
    work_experience: List[ExperienceEntry],
    skills: List[str],
    projects: List[ProjectEntry],
    certifications: List[CertificationEntry],
    languages: List[str],
    hobbies: List[str],
) -> ResumeRecord:
    """Compose extractor and parser outputs into the final record."""
    return ResumeRecord(
        name=name,
        email=contact.get("email", ""),
        phone=contact.get("phone", ""),
        address="",  # no extractor populates it
        summary=summary,
        linkedin=contact.get("linkedin", ""),
        github=contact.get("github", ""),
        job_role=derive_job_roles(work_experience),
        education=education,
        work_experience=work_experience,
        skills=skills,
        projects=projects,
        certifications=certifications,
        languages=languages,
        hobbies=hobbies,
    )


def count_populated_fields(record: ResumeRecord) -> int:
    return len(record.to_sparse_dict())


def grade_parse_quality(record: ResumeRecord) -> ParseQuality:
    populated = count_populated_fields(record)
    if populated >= HIGH_QUALITY_FIELDS:
        return "high"
    if populated >= MEDIUM_QUALITY_FIELDS:
        return "medium"
    return "low"
