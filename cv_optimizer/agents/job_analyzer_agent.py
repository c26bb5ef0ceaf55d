"""
This module defines the JobAnalyzerAgent, responsible for analyzing job descriptions.
"""

import re
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError

from cv_optimizer.agents.agent_base import AgentBase
from cv_optimizer.config.settings import AppConfig
from cv_optimizer.constants.analysis_constants import AnalysisConstants
from cv_optimizer.error_handling.exceptions import (
    CATCHABLE_EXCEPTIONS,
    ConfigurationError,
    LLMResponseParsingError,
)
from cv_optimizer.models.job_models import CandidateProfile, JobAnalysis
from cv_optimizer.services.llm_service import LLMService
from cv_optimizer.templates.content_templates import ContentTemplateManager
from cv_optimizer.utils.json_utils import parse_json_object

_BULLET_PREFIX = re.compile(r"^\s*[-•*]\s+")
_NUMBERED_PREFIX = re.compile(r"^\s*\d+\.\s+")
_BUSINESS_TYPE = re.compile(r"businessType[\"\s:]+([^\",\n]+)", re.IGNORECASE)
_INDUSTRY = re.compile(r"industry[\"\s:]+([^\",\n]+)", re.IGNORECASE)
_KEY_SKILLS = re.compile(r"keySkills[\"\s:]+\[([^\]]+)\]", re.IGNORECASE)
_VALUES = re.compile(r"values[\"\s:]+\[([^\]]+)\]", re.IGNORECASE)


def extract_experience_level(text: str) -> str:
    lower_text = text.lower()
    for keywords, level in AnalysisConstants.EXPERIENCE_LEVEL_KEYWORDS:
        if any(keyword in lower_text for keyword in keywords):
            return level
    return AnalysisConstants.DEFAULT_EXPERIENCE_LEVEL


def extract_requirements(text: str) -> List[str]:
    """Collect bulleted, numbered or explicitly required lines.

    Prefixes are stripped, short lines dropped and the result capped.
    """
    requirements = []
    for line in text.split("\n"):
        lower_line = line.lower()
        if (
            _BULLET_PREFIX.match(line)
            or _NUMBERED_PREFIX.match(line)
            or any(keyword in lower_line for keyword in AnalysisConstants.REQUIREMENT_KEYWORDS)
        ):
            cleaned = _NUMBERED_PREFIX.sub("", _BULLET_PREFIX.sub("", line, count=1), count=1).strip()
            if len(cleaned) > AnalysisConstants.MIN_REQUIREMENT_LENGTH:
                requirements.append(cleaned)
    return requirements[: AnalysisConstants.MAX_REQUIREMENTS]


def extract_skills_from_text(text: str) -> List[str]:
    lower_text = text.lower()
    return [
        skill[0].upper() + skill[1:]
        for skill in AnalysisConstants.COMMON_JOB_SKILLS
        if skill in lower_text
    ]


def _split_quoted_list(raw: str) -> List[str]:
    return [item.strip().replace('"', "") for item in raw.split(",")]


def parse_analysis_from_text(text: str) -> JobAnalysis:
    """Recover what is readable from a reply that is not valid JSON."""
    business_type = _BUSINESS_TYPE.search(text)
    industry = _INDUSTRY.search(text)
    skills = _KEY_SKILLS.search(text)
    values = _VALUES.search(text)

    return JobAnalysis(
        business_type=business_type.group(1).strip() if business_type else AnalysisConstants.UNKNOWN,
        industry=industry.group(1).strip() if industry else AnalysisConstants.UNKNOWN,
        candidate_profile=CandidateProfile(
            experience_level=extract_experience_level(text),
            key_skills=_split_quoted_list(skills.group(1)) if skills else [],
        ),
        values=_split_quoted_list(values.group(1)) if values else [],
        key_requirements=extract_requirements(text),
    )


def basic_job_analysis(job_description: str) -> JobAnalysis:
    """Heuristic analysis used when the model could not be reached."""
    return JobAnalysis(
        candidate_profile=CandidateProfile(
            experience_level=extract_experience_level(job_description),
            key_skills=extract_skills_from_text(job_description),
        ),
        key_requirements=extract_requirements(job_description),
    )


class JobAnalyzerAgent(AgentBase):
    """Agent responsible for turning a job description into a JobAnalysis."""

    def __init__(
        self,
        llm_service: LLMService,
        template_manager: ContentTemplateManager,
        settings: Optional[AppConfig] = None,
    ):
        super().__init__(
            name="JobAnalyzerAgent",
            description="Extracts business context and the target candidate profile from job descriptions.",
            llm_service=llm_service,
            template_manager=template_manager,
            settings=settings,
        )

    async def analyze(self, job_description: str) -> JobAnalysis:
        """Analyze a job description.

        Falls back to text parsing when the reply is not usable JSON, and to
        keyword heuristics when the model call fails. Only a configuration
        error propagates.
        """
        try:
            prompt = self._render_prompt("job_analysis", job_description=job_description)
            response = await self._generate(prompt, self.settings.limits.analysis)
        except ConfigurationError:
            raise
        except CATCHABLE_EXCEPTIONS as e:
            self.logger.warning(
                "Job analysis failed, using basic analysis",
                error_type=type(e).__name__,
                error=str(e),
            )
            return basic_job_analysis(job_description)

        try:
            return JobAnalysis.model_validate(parse_json_object(response))
        except (LLMResponseParsingError, PydanticValidationError) as e:
            self.logger.info(
                "Job analysis reply is not valid JSON, parsing text",
                error=str(e),
            )
            return parse_analysis_from_text(response)
