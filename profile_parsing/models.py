"""Structured values produced by the profile parser."""

from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ParsedModel(BaseModel):
    """Immutable base; dumps with camelCase keys when ``by_alias=True``."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class SectionKey(str, Enum):
    CONTACT = "contact"
    TOP_SKILLS = "topSkills"
    LANGUAGES = "languages"
    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"


class SectionSlice(ParsedModel):
    key: SectionKey
    start: int
    end: int
    content: str


class PreSummaryTrio(ParsedModel):
    """Name, headline and location lines sitting right above the Summary header."""

    name: str
    headline: str
    location: str
    start_offset: int


class Role(ParsedModel):
    title: str
    date_range: str
    location: str = ""
    start: Optional[str] = None
    end: Optional[str] = None
    current: bool = False
    duration: Optional[str] = None


class NarrativeSection(ParsedModel):
    kind: Literal["narrative"] = "narrative"
    paragraphs: List[str]


class TechStackSection(ParsedModel):
    kind: Literal["techStack"] = "techStack"
    items: List[str]


class HighlightsSection(ParsedModel):
    kind: Literal["highlights"] = "highlights"
    bullets: List[str]


ExperienceSection = Annotated[
    Union[NarrativeSection, TechStackSection, HighlightsSection],
    Field(discriminator="kind"),
]


class Company(ParsedModel):
    name: str
    tenure_summary: Optional[str] = None
    roles: List[Role]
    sections: List[ExperienceSection] = Field(default_factory=list)


class SummaryDetails(ParsedModel):
    intro: List[str] = Field(default_factory=list)
    bullets: List[str] = Field(default_factory=list)
    toolbox: List[str] = Field(default_factory=list)


class ResumeDraft(ParsedModel):
    name: Optional[str] = None
    career: Optional[str] = None
    location: Optional[str] = None
    summary: Optional[str] = None
    summary_details: Optional[SummaryDetails] = None
    links: List[str] = Field(default_factory=list)
    email: Optional[str] = None
    linkedin: Optional[str] = None
    experience: Optional[List[Company]] = None
    experience_raw: Optional[str] = None
    education: Optional[str] = None
    skills: Optional[List[str]] = None
    languages: Optional[List[str]] = None
