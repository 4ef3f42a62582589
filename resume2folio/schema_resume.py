# canonical schema – every required field always populated by the parser
from __future__ import annotations

from typing import Dict, List, Literal, Optional, Set

from pydantic import BaseModel, ConfigDict, Field


class ExperienceEntry(BaseModel):
    id: str
    title: str = ""
    company: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""


class EducationEntry(BaseModel):
    id: str
    degree: str = ""
    school: str = ""
    year: str = ""


class ProjectEntry(BaseModel):
    id: str
    title: str = ""
    description: str = ""
    technologies: List[str] = Field(default_factory=list)
    github_url: Optional[str] = None
    live_url: Optional[str] = None


class CertificationEntry(BaseModel):
    id: str
    name: str
    issuer: str = ""
    date: str = ""
    url: Optional[str] = None


class LanguageEntry(BaseModel):
    language: str
    proficiency: str = ""


class ConfidenceReport(BaseModel):
    overall: float = Field(ge=0.0, le=1.0)
    fields: Dict[str, float] = Field(default_factory=dict)


class ParsedData(BaseModel):
    """Structured résumé data as produced by the parser and edited by the user."""

    name: str
    email: str
    phone: str
    summary: str
    experience: List[ExperienceEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    projects: List[ProjectEntry] = Field(default_factory=list)
    # Fields whose value is the extractor's fallback default.
    # None means the provenance is unknown (hand-built or imported data).
    fallback_fields: Optional[Set[str]] = None


class AdvancedParsedData(ParsedData):
    address: Optional[str] = None
    social_links: List[str] = Field(default_factory=list)
    certifications: List[CertificationEntry] = Field(default_factory=list)
    languages: List[LanguageEntry] = Field(default_factory=list)
    confidence: ConfidenceReport = Field(default_factory=lambda: ConfidenceReport(overall=0.0))


class ThemeSettings(BaseModel):
    color: str = "purple"
    font: str = "Inter"
    image: Optional[str] = None
    template: Optional[str] = "modern-dev"


class PortfolioTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    category: str
    preview: str = ""
    layout: Literal["single", "two-column", "minimal", "creative"]
    features: List[str] = Field(default_factory=list)


class GeneratedPortfolio(BaseModel):
    model_config = ConfigDict(frozen=True)

    html: str
    css: str
    assets: List[str] = Field(default_factory=list)
    url: str
    template: PortfolioTemplate


class ParseProgress(BaseModel):
    model_config = ConfigDict(frozen=True)

    step: str
    progress: int = Field(ge=0, le=100)
    confidence: Optional[float] = None


class TextRun(BaseModel):
    """One reconstructed line of a page, with the largest font size seen on it."""

    model_config = ConfigDict(frozen=True)

    text: str
    size: float = 0.0
    top: float = 0.0
    page: int = 1
