"""Models describing an analyzed job description."""

from typing import List

from pydantic import Field, field_validator

from cv_optimizer.constants.analysis_constants import AnalysisConstants

from .base import CamelModel, coerce_str, coerce_str_list


class CandidateProfile(CamelModel):
    """The candidate the employer is looking for."""

    experience_level: str = AnalysisConstants.DEFAULT_EXPERIENCE_LEVEL
    key_skills: List[str] = Field(default_factory=list)
    personality_traits: List[str] = Field(default_factory=list)
    education: str = AnalysisConstants.DEFAULT_EDUCATION

    @field_validator("key_skills", "personality_traits", mode="before")
    @classmethod
    def validate_lists(cls, v):
        return coerce_str_list(v)

    @field_validator("experience_level", mode="before")
    @classmethod
    def validate_experience_level(cls, v):
        return coerce_str(v, AnalysisConstants.DEFAULT_EXPERIENCE_LEVEL)

    @field_validator("education", mode="before")
    @classmethod
    def validate_education(cls, v):
        return coerce_str(v, AnalysisConstants.DEFAULT_EDUCATION)


class JobAnalysis(CamelModel):
    """Structured analysis of a job description.

    Produced once per job description and consumed by CV matching,
    question generation and CV writing.
    """

    business_type: str = AnalysisConstants.UNKNOWN
    industry: str = AnalysisConstants.UNKNOWN
    candidate_profile: CandidateProfile = Field(default_factory=CandidateProfile)
    values: List[str] = Field(default_factory=list)
    key_requirements: List[str] = Field(default_factory=list)
    writing_style: str = AnalysisConstants.DEFAULT_WRITING_STYLE
    domain_standards: str = AnalysisConstants.DEFAULT_DOMAIN_STANDARDS
    missing_info: List[str] = Field(default_factory=list)

    @field_validator("values", "key_requirements", "missing_info", mode="before")
    @classmethod
    def validate_lists(cls, v):
        return coerce_str_list(v)

    @field_validator("business_type", "industry", mode="before")
    @classmethod
    def validate_unknown_defaults(cls, v):
        return coerce_str(v, AnalysisConstants.UNKNOWN)

    @field_validator("writing_style", mode="before")
    @classmethod
    def validate_writing_style(cls, v):
        return coerce_str(v, AnalysisConstants.DEFAULT_WRITING_STYLE)

    @field_validator("domain_standards", mode="before")
    @classmethod
    def validate_domain_standards(cls, v):
        return coerce_str(v, AnalysisConstants.DEFAULT_DOMAIN_STANDARDS)

    @field_validator("candidate_profile", mode="before")
    @classmethod
    def validate_candidate_profile(cls, v):
        return v if v is not None else {}
