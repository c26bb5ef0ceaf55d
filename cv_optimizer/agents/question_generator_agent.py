"""
This module defines the QuestionGeneratorAgent, which asks the candidate for missing CV information.
"""

import time
from typing import Any, List, Optional

from pydantic import ValidationError as PydanticValidationError

from cv_optimizer.agents.agent_base import AgentBase
from cv_optimizer.config.settings import AppConfig
from cv_optimizer.constants.analysis_constants import AnalysisConstants
from cv_optimizer.constants.qa_constants import QAConstants
from cv_optimizer.error_handling.exceptions import (
    CATCHABLE_EXCEPTIONS,
    ConfigurationError,
)
from cv_optimizer.models.cv_models import CVMatchAnalysis, ExtractedCVInfo
from cv_optimizer.models.job_models import JobAnalysis
from cv_optimizer.models.qa_models import (
    GeneratedQuestion,
    QuestionPriority,
    QuestionType,
)
from cv_optimizer.services.llm_service import LLMService
from cv_optimizer.templates.content_templates import ContentTemplateManager
from cv_optimizer.utils.json_utils import parse_json_array

_NOT_PRESENT = "NOT PRESENT - ask for this"


def _padding_question(job_analysis: JobAnalysis, position: int) -> GeneratedQuestion:
    return GeneratedQuestion(
        id=f"q-{position}",
        type=QuestionType.EXPERIENCE,
        question=QAConstants.PADDING_QUESTION.format(business_type=job_analysis.business_type),
        purpose="Gather more experience details",
        priority=QuestionPriority.MEDIUM,
    )


def normalize_question_count(
    questions: List[GeneratedQuestion], job_analysis: JobAnalysis
) -> List[GeneratedQuestion]:
    """Pad with generic experience questions up to the minimum, then cap."""
    questions = list(questions)
    while len(questions) < QAConstants.MIN_QUESTIONS:
        questions.append(_padding_question(job_analysis, len(questions) + 1))
    return questions[: QAConstants.MAX_QUESTIONS]


def generate_default_questions(
    job_analysis: JobAnalysis,
    cv_match: Optional[CVMatchAnalysis] = None,
    extracted_cv_info: Optional[ExtractedCVInfo] = None,
) -> List[GeneratedQuestion]:
    """Build a question list without the model.

    Topics the CV already covers are skipped or replaced with questions
    about achievements and gaps.
    """
    info = extracted_cv_info or ExtractedCVInfo()
    profile = job_analysis.candidate_profile
    questions: List[GeneratedQuestion] = []

    def add(question_type, text, purpose, priority=QuestionPriority.HIGH):
        questions.append(
            GeneratedQuestion(
                id=f"q-{len(questions) + 1}",
                type=question_type,
                question=text,
                purpose=purpose,
                priority=priority,
            )
        )

    if not info.has_personal_info:
        add(QuestionType.PERSONAL_INFO, QAConstants.PERSONAL_INFO_QUESTION, "Get contact information")

    if not info.has_experience:
        add(
            QuestionType.EXPERIENCE,
            QAConstants.EXPERIENCE_QUESTION.format(
                experience_level=profile.experience_level,
                industry=job_analysis.industry,
            ),
            "Understand work experience",
        )
    else:
        add(
            QuestionType.EXPERIENCE,
            QAConstants.EXPERIENCE_DETAILS_QUESTION,
            "Get detailed achievements and metrics",
        )

    if not info.has_skills:
        add(
            QuestionType.SKILLS,
            QAConstants.SKILLS_QUESTION.format(
                skills=", ".join(profile.key_skills[: QAConstants.MAX_SKILLS_IN_QUESTION])
            ),
            "Verify key skills",
        )
    elif cv_match is not None and cv_match.missing_skills:
        add(
            QuestionType.SKILLS,
            QAConstants.SKILL_GAPS_QUESTION.format(
                skills=", ".join(
                    cv_match.missing_skills[: QAConstants.MAX_MISSING_SKILLS_IN_QUESTION]
                )
            ),
            "Fill skill gaps",
        )

    if not info.has_education:
        question = QAConstants.EDUCATION_QUESTION
        if profile.education != AnalysisConstants.DEFAULT_EDUCATION:
            question += QAConstants.EDUCATION_REQUIREMENT_SUFFIX.format(education=profile.education)
        add(QuestionType.EDUCATION, question, "Verify education", QuestionPriority.MEDIUM)

    add(QuestionType.EXPERIENCE, QAConstants.ACHIEVEMENTS_QUESTION, "Get achievement data")
    add(QuestionType.SUMMARY, QAConstants.SUMMARY_QUESTION, "Create professional summary")

    return normalize_question_count(questions, job_analysis)


def build_cv_context(extracted_cv_info: Optional[ExtractedCVInfo]) -> str:
    """Describe which CV sections are already filled in."""
    if extracted_cv_info is None:
        return (
            "No CV uploaded - ask for all information including personal details, "
            "experience, education, and skills."
        )

    info = extracted_cv_info
    if info.has_personal_info:
        personal = (
            f"Name: {info.personal_info.full_name or 'present'}, "
            f"Email: {info.personal_info.email or 'present'}"
        )
    else:
        personal = _NOT_PRESENT
    experience = f"{len(info.experience)} position(s) found" if info.has_experience else _NOT_PRESENT
    education = f"{len(info.education)} entry/entries found" if info.has_education else _NOT_PRESENT
    if info.has_skills:
        top_skills = ", ".join(info.skills[: QAConstants.MAX_SKILLS_IN_CONTEXT])
        skills = f"{len(info.skills)} skills found: {top_skills}"
    else:
        skills = _NOT_PRESENT

    return "\n".join(
        [
            "CV Information Already Available:",
            f"- Personal Info: {personal}",
            f"- Experience: {experience}",
            f"- Education: {education}",
            f"- Skills: {skills}",
            "",
            "IMPORTANT: DO NOT ask questions for information that is already present in the CV.",
            "- If personal info (name, email) is present, skip personal_info questions",
            "- If experience is present, focus on missing details or achievements, not basic experience",
            "- If skills are present, focus on missing skills or deeper expertise, not basic skill questions",
            "- If education is present, skip basic education questions unless specific details are missing",
        ]
    )


def build_focus_areas(extracted_cv_info: Optional[ExtractedCVInfo]) -> str:
    info = extracted_cv_info or ExtractedCVInfo()
    return "\n".join(
        [
            "- SKIP personal information (name, email, location) - already in CV"
            if info.has_personal_info
            else "- Personal information (name, email, location) - NOT in CV",
            "- Focus on experience DETAILS, achievements, metrics - basic experience is in CV"
            if info.has_experience
            else "- Experience details - NOT in CV",
            "- SKIP basic education - already in CV"
            if info.has_education
            else "- Education - NOT in CV",
            "- Focus on missing skills or deeper expertise - basic skills are in CV"
            if info.has_skills
            else "- Skills - NOT in CV",
        ]
    )


def build_match_context(cv_match: Optional[CVMatchAnalysis]) -> str:
    if cv_match is None:
        return ""
    return "\n".join(
        [
            f"CV Match Score: {cv_match.match_score}%",
            f"Missing Skills: {', '.join(cv_match.missing_skills)}",
            f"Missing Requirements: {'; '.join(cv_match.missing_requirements)}",
        ]
    )


class QuestionGeneratorAgent(AgentBase):
    """Agent that generates clarifying questions for the candidate."""

    def __init__(
        self,
        llm_service: LLMService,
        template_manager: ContentTemplateManager,
        settings: Optional[AppConfig] = None,
    ):
        super().__init__(
            name="QuestionGeneratorAgent",
            description="Generates questions that collect information missing from the CV.",
            llm_service=llm_service,
            template_manager=template_manager,
            settings=settings,
        )

    def _to_questions(
        self, items: List[Any], extracted_cv_info: Optional[ExtractedCVInfo]
    ) -> List[GeneratedQuestion]:
        timestamp_ms = int(time.time() * 1000)
        skip_personal = bool(extracted_cv_info and extracted_cv_info.has_personal_info)
        questions = []
        for index, item in enumerate(items):
            if not isinstance(item, dict) or not str(item.get("question") or "").strip():
                continue
            try:
                question = GeneratedQuestion.model_validate(
                    {**item, "id": f"q-{timestamp_ms}-{index}"}
                )
            except PydanticValidationError as e:
                self.logger.debug("Skipping invalid question item", index=index, error=str(e))
                continue
            if skip_personal and question.type == QuestionType.PERSONAL_INFO:
                continue
            questions.append(question)
        return questions

    async def generate(
        self,
        job_analysis: JobAnalysis,
        cv_match: Optional[CVMatchAnalysis] = None,
        extracted_cv_info: Optional[ExtractedCVInfo] = None,
    ) -> List[GeneratedQuestion]:
        """Generate 10 to 15 questions for the information the CV lacks."""
        profile = job_analysis.candidate_profile
        try:
            prompt = self._render_prompt(
                "question_generation",
                business_type=job_analysis.business_type,
                industry=job_analysis.industry,
                key_skills=", ".join(profile.key_skills),
                key_requirements="; ".join(job_analysis.key_requirements),
                values=", ".join(job_analysis.values),
                writing_style=job_analysis.writing_style,
                domain_standards=job_analysis.domain_standards,
                match_context=build_match_context(cv_match),
                cv_context=build_cv_context(extracted_cv_info),
                focus_areas=build_focus_areas(extracted_cv_info),
            )
            response = await self._generate(prompt, self.settings.limits.questions)
            questions = self._to_questions(parse_json_array(response), extracted_cv_info)
        except ConfigurationError:
            raise
        except (PydanticValidationError, *CATCHABLE_EXCEPTIONS) as e:
            self.logger.warning(
                "Question generation failed, using default questions",
                error_type=type(e).__name__,
                error=str(e),
            )
            return generate_default_questions(job_analysis, cv_match, extracted_cv_info)

        if not questions:
            self.logger.warning("Model returned no usable questions, using default questions")
            return generate_default_questions(job_analysis, cv_match, extracted_cv_info)

        self.logger.info("Questions generated", count=len(questions))
        return normalize_question_count(questions, job_analysis)
