"""Data models for the CV Optimizer."""

from .cv_models import (
    CVMatchAnalysis,
    EducationEntry,
    ExperienceEntry,
    ExtractedCVInfo,
    PersonalInfo,
)
from .diagnostics_models import ConnectionDiagnostics, ModelProbeResult
from .generation_models import GenerationResult, GenerationStatus
from .job_models import CandidateProfile, JobAnalysis
from .llm_data_models import LLMRequest, LLMResponse
from .qa_models import (
    GeneratedQuestion,
    GenerateQuestionsResult,
    QuestionPriority,
    QuestionType,
)

__all__ = [
    "CVMatchAnalysis",
    "CandidateProfile",
    "ConnectionDiagnostics",
    "EducationEntry",
    "ExperienceEntry",
    "ExtractedCVInfo",
    "GenerateQuestionsResult",
    "GeneratedQuestion",
    "GenerationResult",
    "GenerationStatus",
    "JobAnalysis",
    "LLMRequest",
    "LLMResponse",
    "ModelProbeResult",
    "PersonalInfo",
    "QuestionPriority",
    "QuestionType",
]
