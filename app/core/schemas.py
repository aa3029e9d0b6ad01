from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Literal, Optional


ParseQuality = Literal["high", "medium", "low"]
ExtractionMode = Literal["strict", "loose", "auto"]
StrategyName = Literal["strict", "loose"]


class RecordModel(BaseModel):
    """Immutable base for everything built during a parse. Dumps as camelCase."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Line(RecordModel):
    index: int = Field(..., description="Position in the normalized line sequence")
    text: str
    source_line: int = Field(..., description="1-based line number in the raw text")

    @property
    def locator(self) -> str:
        return f"text:line:{self.source_line}"


class SectionSpan(RecordModel):
    """Header at start_index; content is the half-open range [start_index+1, end_index)."""
    section_type: str
    start_index: int
    end_index: int
    header_text: str


class DateRange(RecordModel):
    start_date: str = ""  # YYYY-MM-DD or ""
    end_date: str = ""  # YYYY-MM-DD, "Present" or ""


class EducationEntry(RecordModel):
    institution: str = ""
    degree: str = ""
    field_of_study: str = ""
    start_date: str = ""
    end_date: str = ""
    cgpa: Optional[str] = None  # opaque, as written in the resume


class ExperienceEntry(RecordModel):
    company: str = ""
    position: str = ""
    location: Optional[str] = None
    start_date: str = ""
    end_date: str = ""
    description: List[str] = Field(default_factory=list)


class ProjectEntry(RecordModel):
    title: str = ""
    technologies: str = ""
    link: Optional[str] = None
    description: List[str] = Field(default_factory=list)


class CertificationEntry(RecordModel):
    name: str
    issuer: str = ""
    date: str = ""


class ResumeRecord(RecordModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    summary: str = ""
    linkedin: str = ""
    github: str = ""
    job_role: List[str] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    work_experience: List[ExperienceEntry] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    projects: List[ProjectEntry] = Field(default_factory=list)
    certifications: List[CertificationEntry] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)
    hobbies: List[str] = Field(default_factory=list)

    def to_sparse_dict(self) -> Dict[str, Any]:
        """camelCase dict without empty fields. Absence means "not found"."""
        data = self.model_dump(by_alias=True, exclude_none=True)
        return {k: v for k, v in data.items() if v not in ("", [])}


class ParseTextRequest(BaseModel):
    text: str = Field(..., description="Plain text extracted from a resume document")
    mode: ExtractionMode = Field(default="strict", description="strict, loose, or auto (best of both)")


class DetectedSection(BaseModel):
    section_type: str
    header_text: str
    locator: str = Field(..., description="Where the header was found (text:line:N)")
    line_count: int = Field(..., description="Number of content lines under the header")


class ParseResponse(BaseModel):
    resume: Dict[str, Any]
    mode: StrategyName = Field(..., description="Strategy that produced the resume")
    sections: List[DetectedSection] = Field(default_factory=list)
    parse_quality: ParseQuality
    warnings: List[str] = Field(default_factory=list)
