"""Models for CV matching and CV information extraction."""

import math
from typing import List, Optional

from pydantic import Field, field_validator

from cv_optimizer.constants.analysis_constants import AnalysisConstants

from .base import CamelModel, coerce_str_list


def clamp_score(value: float) -> int:
    """Round half up and clamp a match score into the valid range."""
    return max(
        AnalysisConstants.MIN_MATCH_SCORE,
        min(AnalysisConstants.MAX_MATCH_SCORE, int(math.floor(value + 0.5))),
    )


class CVMatchAnalysis(CamelModel):
    """How well a CV satisfies a job's skills and requirements."""

    match_score: int = 0
    matched_skills: List[str] = Field(default_factory=list)
    missing_skills: List[str] = Field(default_factory=list)
    matched_requirements: List[str] = Field(default_factory=list)
    missing_requirements: List[str] = Field(default_factory=list)
    semantic_gaps: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)

    @field_validator("match_score", mode="before")
    @classmethod
    def validate_match_score(cls, v):
        if v is None:
            return 0
        if isinstance(v, bool) or not isinstance(v, (int, float, str)):
            raise ValueError("match score must be a number")
        try:
            score = float(v)
        except ValueError as e:
            raise ValueError("match score must be a number") from e
        if not math.isfinite(score):
            raise ValueError("match score must be a finite number")
        return clamp_score(score)

    @field_validator(
        "matched_skills",
        "missing_skills",
        "matched_requirements",
        "missing_requirements",
        "semantic_gaps",
        "recommendations",
        mode="before",
    )
    @classmethod
    def validate_lists(cls, v):
        return coerce_str_list(v)


def _none_if_blank(value):
    if value is None:
        return None
    text = str(value).strip()
    if not text or text.lower() in ("null", "none", "n/a"):
        return None
    return text


class PersonalInfo(CamelModel):
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def validate_text(cls, v):
        return _none_if_blank(v)


class ExperienceEntry(CamelModel):
    title: Optional[str] = None
    company: Optional[str] = None
    duration: Optional[str] = None
    description: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def validate_text(cls, v):
        return _none_if_blank(v)


class EducationEntry(CamelModel):
    degree: Optional[str] = None
    institution: Optional[str] = None
    field: Optional[str] = None
    year: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def validate_text(cls, v):
        return _none_if_blank(v)


class ExtractedCVInfo(CamelModel):
    """Information detected in an uploaded CV.

    The ``has_*`` flags tell the question generator which topics it may skip.
    """

    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    experience: List[ExperienceEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    certifications: List[str] = Field(default_factory=list)
    summary: Optional[str] = None
    has_personal_info: bool = False
    has_experience: bool = False
    has_education: bool = False
    has_skills: bool = False

    @field_validator("skills", "certifications", mode="before")
    @classmethod
    def validate_lists(cls, v):
        return coerce_str_list(v)

    @field_validator("experience", "education", mode="before")
    @classmethod
    def validate_entries(cls, v):
        if not isinstance(v, (list, tuple)):
            return []
        return [entry for entry in v if isinstance(entry, (dict, CamelModel))]

    @field_validator("personal_info", mode="before")
    @classmethod
    def validate_personal_info(cls, v):
        return v if isinstance(v, (dict, PersonalInfo)) else {}

    @field_validator("summary", mode="before")
    @classmethod
    def validate_summary(cls, v):
        return _none_if_blank(v)

    def with_derived_flags(self) -> "ExtractedCVInfo":
        """Return a copy whose flags are computed from the extracted data."""
        info = self.personal_info
        return self.model_copy(
            update={
                "has_personal_info": bool(info.full_name or info.email or info.phone),
                "has_experience": any(
                    entry.title or entry.company for entry in self.experience
                ),
                "has_education": any(
                    entry.degree or entry.institution for entry in self.education
                ),
                "has_skills": bool(self.skills),
            }
        )
