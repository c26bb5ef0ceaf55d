"""Agents that turn prompts and model replies into domain models."""

from .agent_base import AgentBase
from .cv_analyzer_agent import CVAnalyzerAgent
from .cv_info_extractor_agent import CVInfoExtractorAgent
from .cv_writer_agent import CVWriterAgent
from .job_analyzer_agent import JobAnalyzerAgent
from .question_generator_agent import QuestionGeneratorAgent

__all__ = [
    "AgentBase",
    "CVAnalyzerAgent",
    "CVInfoExtractorAgent",
    "CVWriterAgent",
    "JobAnalyzerAgent",
    "QuestionGeneratorAgent",
]
