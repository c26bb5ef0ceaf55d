"""Models for the clarifying question session."""

from enum import Enum
from typing import List

from pydantic import Field, field_validator

from .base import CamelModel


class QuestionType(str, Enum):
    """Topic a clarifying question collects information about."""

    PERSONAL_INFO = "personal_info"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    CERTIFICATIONS = "certifications"
    LANGUAGES = "languages"
    SUMMARY = "summary"


class QuestionPriority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class GeneratedQuestion(CamelModel):
    """A single question shown to the candidate."""

    id: str
    type: QuestionType = QuestionType.EXPERIENCE
    question: str
    purpose: str = ""
    priority: QuestionPriority = QuestionPriority.MEDIUM

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, v):
        """Unknown or missing types are treated as experience questions."""
        if isinstance(v, QuestionType):
            return v
        normalized = str(v or "").strip().lower()
        try:
            return QuestionType(normalized)
        except ValueError:
            return QuestionType.EXPERIENCE

    @field_validator("priority", mode="before")
    @classmethod
    def validate_priority(cls, v):
        if isinstance(v, QuestionPriority):
            return v
        normalized = str(v or "").strip().lower()
        try:
            return QuestionPriority(normalized)
        except ValueError:
            return QuestionPriority.MEDIUM

    @field_validator("purpose", mode="before")
    @classmethod
    def validate_purpose(cls, v):
        return "" if v is None else str(v)


class GenerateQuestionsResult(CamelModel):
    questions: List[GeneratedQuestion] = Field(default_factory=list)
    total_questions: int = 0
