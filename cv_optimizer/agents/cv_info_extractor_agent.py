"""
This module defines the CVInfoExtractorAgent, which detects what a CV already contains.
"""

import re
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from cv_optimizer.agents.agent_base import AgentBase
from cv_optimizer.config.settings import AppConfig
from cv_optimizer.constants.analysis_constants import AnalysisConstants
from cv_optimizer.error_handling.exceptions import (
    CATCHABLE_EXCEPTIONS,
    ConfigurationError,
)
from cv_optimizer.models.cv_models import ExtractedCVInfo, PersonalInfo
from cv_optimizer.services.llm_service import LLMService
from cv_optimizer.templates.content_templates import ContentTemplateManager
from cv_optimizer.utils.json_utils import parse_json_object

_EMAIL = re.compile(AnalysisConstants.EMAIL_PATTERN, re.IGNORECASE)
_PHONE = re.compile(AnalysisConstants.PHONE_PATTERN)


def extract_basic_cv_info(cv_content: str) -> ExtractedCVInfo:
    """Regex and keyword detection used when the model reply is unusable."""
    lower_content = cv_content.lower()

    email = _EMAIL.search(cv_content)
    phone = _PHONE.search(cv_content)
    skills = [skill for skill in AnalysisConstants.COMMON_CV_SKILLS if skill in lower_content]

    return ExtractedCVInfo(
        personal_info=PersonalInfo(
            email=email.group(0) if email else None,
            phone=phone.group(0) if phone else None,
        ),
        skills=skills,
        has_personal_info=bool(email or phone),
        has_experience=any(
            indicator in lower_content for indicator in AnalysisConstants.EXPERIENCE_INDICATORS
        ),
        has_education=any(
            indicator in lower_content for indicator in AnalysisConstants.EDUCATION_INDICATORS
        ),
        has_skills=bool(skills),
    )


class CVInfoExtractorAgent(AgentBase):
    """Agent that extracts structured information from CV text."""

    def __init__(
        self,
        llm_service: LLMService,
        template_manager: ContentTemplateManager,
        settings: Optional[AppConfig] = None,
    ):
        super().__init__(
            name="CVInfoExtractorAgent",
            description="Extracts personal details, experience, education and skills from a CV.",
            llm_service=llm_service,
            template_manager=template_manager,
            settings=settings,
        )

    async def extract(self, cv_content: str) -> ExtractedCVInfo:
        if not cv_content or not cv_content.strip():
            return ExtractedCVInfo()

        try:
            prompt = self._render_prompt("cv_info_extraction", cv_content=cv_content)
            response = await self._generate(prompt, self.settings.limits.analysis)
            return ExtractedCVInfo.model_validate(parse_json_object(response)).with_derived_flags()
        except ConfigurationError:
            raise
        except (PydanticValidationError, *CATCHABLE_EXCEPTIONS) as e:
            self.logger.warning(
                "CV info extraction failed, using basic extraction",
                error_type=type(e).__name__,
                error=str(e),
            )
        return extract_basic_cv_info(cv_content)
