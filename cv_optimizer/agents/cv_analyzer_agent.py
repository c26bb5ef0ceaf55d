"""
This module defines the CVAnalyzerAgent, which scores a CV against an analyzed job.
"""

import json
import re
from typing import Any, Dict, List, Optional, Set

from pydantic import ValidationError as PydanticValidationError

from cv_optimizer.agents.agent_base import AgentBase
from cv_optimizer.config.settings import AppConfig
from cv_optimizer.constants.analysis_constants import AnalysisConstants
from cv_optimizer.error_handling.exceptions import (
    CATCHABLE_EXCEPTIONS,
    ConfigurationError,
)
from cv_optimizer.models.cv_models import CVMatchAnalysis, clamp_score
from cv_optimizer.models.job_models import JobAnalysis
from cv_optimizer.services.llm_service import LLMService
from cv_optimizer.templates.content_templates import ContentTemplateManager
from cv_optimizer.utils.json_utils import extract_json_object

_NON_WORD = re.compile(r"[^\w]")


def significant_words(text: str) -> Set[str]:
    """Distinct lowercase words longer than the significance threshold."""
    return {
        _NON_WORD.sub("", word)
        for word in text.lower().split()
        if len(word) > AnalysisConstants.SIGNIFICANT_WORD_LENGTH
    }


def calculate_keyword_overlap(cv_content: str, job_description: str) -> float:
    """Share of significant job description words that also appear in the CV."""
    cv_words = significant_words(cv_content)
    job_words = significant_words(job_description)
    if not job_words:
        return 0.0
    return len(job_words & cv_words) / len(job_words)


def generate_recommendations(
    missing_skills: List[str], missing_requirements: List[str]
) -> List[str]:
    recommendations = []
    if missing_skills:
        top_skills = ", ".join(missing_skills[: AnalysisConstants.MAX_RECOMMENDED_SKILLS])
        recommendations.append(f"Highlight experience with: {top_skills}")
    if missing_requirements:
        recommendations.append(f"Address requirement: {missing_requirements[0]}")
    if not recommendations:
        recommendations.append(AnalysisConstants.WELL_MATCHED_RECOMMENDATION)
    return recommendations


def calculate_basic_match(
    cv_content: str, job_description: str, job_analysis: JobAnalysis
) -> CVMatchAnalysis:
    """Keyword-based match score.

    Skills and requirements each weigh 40 points and keyword overlap 20,
    with a small bonus for detailed CVs.
    """
    cv_lower = cv_content.lower()
    key_skills = job_analysis.candidate_profile.key_skills
    requirements = job_analysis.key_requirements

    matched_skills = [skill for skill in key_skills if skill.lower() in cv_lower]
    missing_skills = [skill for skill in key_skills if skill.lower() not in cv_lower]

    matched_requirements = []
    missing_requirements = []
    for requirement in requirements:
        words = [
            word
            for word in requirement.lower().split()
            if len(word) > AnalysisConstants.SIGNIFICANT_WORD_LENGTH
        ]
        if any(word in cv_lower for word in words):
            matched_requirements.append(requirement)
        else:
            missing_requirements.append(requirement)

    skill_score = len(matched_skills) / max(1, len(key_skills)) * AnalysisConstants.SKILL_WEIGHT
    requirement_score = (
        len(matched_requirements) / max(1, len(requirements)) * AnalysisConstants.REQUIREMENT_WEIGHT
    )
    keyword_score = (
        calculate_keyword_overlap(cv_content, job_description) * AnalysisConstants.KEYWORD_WEIGHT
    )

    match_score = clamp_score(skill_score + requirement_score + keyword_score)
    if len(cv_content) > AnalysisConstants.DETAILED_CV_LENGTH:
        match_score = min(
            AnalysisConstants.MAX_MATCH_SCORE,
            match_score + AnalysisConstants.DETAILED_CV_BONUS,
        )

    return CVMatchAnalysis(
        match_score=match_score,
        matched_skills=matched_skills,
        missing_skills=missing_skills,
        matched_requirements=matched_requirements,
        missing_requirements=missing_requirements,
        semantic_gaps=missing_requirements[: AnalysisConstants.MAX_SEMANTIC_GAPS],
        recommendations=generate_recommendations(missing_skills, missing_requirements),
    )


def _has_valid_score(data: Dict[str, Any]) -> bool:
    score = data.get("matchScore", data.get("match_score"))
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        return False
    return AnalysisConstants.MIN_MATCH_SCORE <= score <= AnalysisConstants.MAX_MATCH_SCORE


class CVAnalyzerAgent(AgentBase):
    """Agent that measures how well a CV fits a job."""

    def __init__(
        self,
        llm_service: LLMService,
        template_manager: ContentTemplateManager,
        settings: Optional[AppConfig] = None,
    ):
        super().__init__(
            name="CVAnalyzerAgent",
            description="Scores a CV against the skills and requirements of a job.",
            llm_service=llm_service,
            template_manager=template_manager,
            settings=settings,
        )

    def _parse_match(self, response: str) -> Optional[CVMatchAnalysis]:
        candidate = extract_json_object(response)
        if candidate is None:
            self.logger.warning("No JSON found in match reply, using fallback")
            return None
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError as e:
            self.logger.warning("Match reply is not valid JSON", error=str(e))
            return None
        if not isinstance(data, dict) or not _has_valid_score(data):
            self.logger.warning("Match reply has an invalid matchScore, using fallback")
            return None
        try:
            return CVMatchAnalysis.model_validate(data)
        except PydanticValidationError as e:
            self.logger.warning("Match reply failed validation", error=str(e))
            return None

    async def analyze_match(
        self, cv_content: str, job_description: str, job_analysis: JobAnalysis
    ) -> CVMatchAnalysis:
        """Score the CV with the model, falling back to keyword matching."""
        try:
            prompt = self._render_prompt(
                "cv_match",
                job_description=job_description,
                key_requirements="\n".join(job_analysis.key_requirements),
                key_skills=", ".join(job_analysis.candidate_profile.key_skills),
                cv_content=cv_content,
            )
            response = await self._generate(prompt, self.settings.limits.analysis)
        except ConfigurationError:
            raise
        except CATCHABLE_EXCEPTIONS as e:
            self.logger.warning(
                "CV match analysis failed, using fallback calculation",
                error_type=type(e).__name__,
                error=str(e),
            )
            return calculate_basic_match(cv_content, job_description, job_analysis)

        match = self._parse_match(response)
        if match is None:
            return calculate_basic_match(cv_content, job_description, job_analysis)

        self.logger.info("CV match analysis succeeded", match_score=match.match_score)
        return match
