"""
This module defines the CVWriterAgent, which writes the optimized CV and the cover letter.
"""

from typing import Optional

from cv_optimizer.agents.agent_base import AgentBase
from cv_optimizer.config.settings import AppConfig
from cv_optimizer.models.job_models import JobAnalysis
from cv_optimizer.services.llm_service import LLMService
from cv_optimizer.templates.content_templates import ContentTemplateManager


def build_analysis_context(job_analysis: Optional[JobAnalysis]) -> str:
    if job_analysis is None:
        return ""
    profile = job_analysis.candidate_profile
    return "\n".join(
        [
            "",
            "Business Context:",
            f"- Business Type: {job_analysis.business_type}",
            f"- Industry: {job_analysis.industry}",
            f"- Target Experience Level: {profile.experience_level}",
            f"- Key Skills to Highlight: {', '.join(profile.key_skills)}",
            f"- Writing Style: {job_analysis.writing_style}",
            f"- Domain Standards: {job_analysis.domain_standards}",
            "",
        ]
    )


class CVWriterAgent(AgentBase):
    """Agent that generates the tailored CV and cover letter text.

    Model failures are not recovered here; they propagate to the caller.
    """

    def __init__(
        self,
        llm_service: LLMService,
        template_manager: ContentTemplateManager,
        settings: Optional[AppConfig] = None,
    ):
        super().__init__(
            name="CVWriterAgent",
            description="Writes CVs and cover letters tailored to a job description.",
            llm_service=llm_service,
            template_manager=template_manager,
            settings=settings,
        )

    async def generate_cv(
        self,
        job_description: str,
        cv_data: str,
        job_analysis: Optional[JobAnalysis] = None,
    ) -> str:
        profile = job_analysis.candidate_profile if job_analysis else None
        prompt = self._render_prompt(
            "cv_generation",
            job_description=job_description,
            analysis_context=build_analysis_context(job_analysis),
            cv_data=cv_data,
            writing_style=job_analysis.writing_style if job_analysis else "professional",
            domain_standards=(
                job_analysis.domain_standards
                if job_analysis
                else "standard professional CV format"
            ),
            experience_level=profile.experience_level if profile else "professional",
            key_skills=(
                ", ".join(profile.key_skills)
                if profile and profile.key_skills
                else "all relevant skills"
            ),
        )
        self.logger.info(
            "Generating CV",
            job_description_length=len(job_description),
            cv_data_length=len(cv_data),
            has_job_analysis=job_analysis is not None,
        )
        optimized_cv = await self._generate(prompt, self.settings.limits.cv_generation)
        self.logger.info("CV generated", length=len(optimized_cv))
        return optimized_cv

    async def generate_cover_letter(
        self, job_description: str, cv_data: str, full_name: str, email: str
    ) -> str:
        prompt = self._render_prompt(
            "cover_letter",
            job_description=job_description,
            cv_data=cv_data,
            full_name=full_name,
            email=email,
        )
        return await self.llm_service.generate_text(
            prompt,
            model=self.settings.huggingface.cover_letter_model,
            max_tokens=self.settings.limits.cover_letter,
        )
